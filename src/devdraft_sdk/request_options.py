"""Per-request overrides for the Devdraft client."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

from .exceptions import DevdraftValidationError

DEFAULT_TIMEOUT = 60.0
DEFAULT_MAX_RETRIES = 2


@dataclass(frozen=True)
class RequestOptions:
    timeout: float | None = None
    max_retries: int | None = None
    headers: Mapping[str, str] | None = None
    query: Mapping[str, object] | None = None
    idempotency_key: str | None = None

    @classmethod
    def parse(cls, options: "RequestOptions | Mapping[str, Any] | None") -> "RequestOptions":
        """Build per-call options from ``None``, a mapping of overrides or an instance."""
        if options is None:
            return cls()
        if isinstance(options, RequestOptions):
            return options
        if not isinstance(options, Mapping):
            raise DevdraftValidationError(
                f"request options must be a mapping or RequestOptions, got {type(options).__name__}"
            )
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise DevdraftValidationError(f"unknown request option(s): {', '.join(unknown)}")
        return cls(**dict(options))


def resolve_request_options(
    options: RequestOptions | Mapping[str, Any] | None,
    *,
    timeout: float | None = None,
    max_retries: int | None = None,
) -> RequestOptions:
    """Fill unset values: per-call > client default > hard-coded fallback."""
    parsed = RequestOptions.parse(options)

    resolved_timeout = parsed.timeout
    if resolved_timeout is None:
        resolved_timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
    if resolved_timeout <= 0:
        raise DevdraftValidationError("timeout must be greater than 0")

    resolved_retries = parsed.max_retries
    if resolved_retries is None:
        resolved_retries = max_retries if max_retries is not None else DEFAULT_MAX_RETRIES
    if resolved_retries < 0:
        raise DevdraftValidationError("max_retries must be non-negative")

    return replace(parsed, timeout=float(resolved_timeout), max_retries=int(resolved_retries))
