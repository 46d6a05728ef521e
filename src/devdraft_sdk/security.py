"""Header redaction, base URL validation and Retry-After parsing."""

from __future__ import annotations

import datetime as _dt
from email.utils import parsedate_to_datetime
from typing import Mapping
from urllib.parse import urlparse


SENSITIVE_HEADERS = {
    "authorization",
    "x-client-key",
    "x-client-secret",
    "idempotency-key",
}

LOOPBACK_HOSTS = {"localhost", "127.0.0.1", "::1"}


def sanitize_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return headers with credential values redacted for logging."""
    return {
        key: "[REDACTED]" if key.lower() in SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }


def validate_base_url(url: str, *, allow_http: bool = False) -> None:
    """Reject base URLs without a host, with exotic schemes, or plain HTTP to remote hosts."""
    if "\x00" in url:
        raise ValueError("Invalid base_url")
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError("base_url must include scheme and host")
    if parsed.scheme not in {"http", "https"}:
        raise ValueError(f"Unsupported base_url scheme: {parsed.scheme}")
    if parsed.scheme == "http" and not allow_http:
        if (parsed.hostname or "").lower() not in LOOPBACK_HOSTS:
            raise ValueError("Non-HTTPS base_url is not allowed without allow_http=True")


def parse_retry_after(raw: str | None) -> float | None:
    """Parse a Retry-After header (delta seconds or HTTP date) into seconds."""
    if raw is None:
        return None
    raw = raw.strip()
    if not raw:
        return None

    try:
        return max(0.0, float(raw))
    except ValueError:
        pass

    try:
        parsed = parsedate_to_datetime(raw)
    except (ValueError, TypeError, OverflowError):
        return None
    if parsed is None:
        return None

    if parsed.utcoffset() is None:
        parsed = parsed.replace(tzinfo=_dt.timezone.utc)
    delta = (parsed - _dt.datetime.now(_dt.timezone.utc)).total_seconds()
    return max(0.0, delta)
