from __future__ import annotations

from datetime import datetime, timedelta, timezone
from email.utils import format_datetime

import pytest

from devdraft_sdk.security import parse_retry_after, sanitize_headers, validate_base_url


def test_sanitize_headers_redacts_credentials() -> None:
    headers = {
        "x-client-key": "key_live",
        "X-Client-Secret": "shh",
        "idempotency-key": "idem-1",
        "Accept": "application/json",
    }

    assert sanitize_headers(headers) == {
        "x-client-key": "[REDACTED]",
        "X-Client-Secret": "[REDACTED]",
        "idempotency-key": "[REDACTED]",
        "Accept": "application/json",
    }


@pytest.mark.parametrize(
    "url",
    ["https://api.devdraft.ai", "http://localhost:4010", "http://127.0.0.1:4010/mock"],
)
def test_validate_base_url_accepts(url: str) -> None:
    validate_base_url(url)


@pytest.mark.parametrize(
    ("url", "message"),
    [
        ("api.devdraft.ai", "scheme and host"),
        ("ftp://api.devdraft.ai", "Unsupported base_url scheme"),
        ("http://api.devdraft.ai", "allow_http"),
        ("https://api.devdraft.ai\x00", "Invalid base_url"),
    ],
)
def test_validate_base_url_rejects(url: str, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        validate_base_url(url)


def test_validate_base_url_allows_remote_http_when_opted_in() -> None:
    validate_base_url("http://sandbox.internal", allow_http=True)


def test_parse_retry_after_seconds() -> None:
    assert parse_retry_after("3") == 3.0
    assert parse_retry_after(" 1.5 ") == 1.5
    assert parse_retry_after("-4") == 0.0


def test_parse_retry_after_http_date() -> None:
    when = datetime.now(timezone.utc) + timedelta(seconds=30)

    delay = parse_retry_after(format_datetime(when, usegmt=True))

    assert delay is not None
    assert 25.0 <= delay <= 30.0


@pytest.mark.parametrize("raw", [None, "", "soon"])
def test_parse_retry_after_ignores_garbage(raw) -> None:
    assert parse_retry_after(raw) is None
