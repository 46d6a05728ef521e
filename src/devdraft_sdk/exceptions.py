"""SDK-specific exceptions."""

from __future__ import annotations

from typing import Mapping


class DevdraftError(Exception):
    """Base exception for all Devdraft SDK failures."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        error_code: str | None = None,
        body: object = None,
        headers: Mapping[str, str] | None = None,
        request_id: str | None = None,
        retry_after: float | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.body = body
        self.headers = dict(headers) if headers is not None else {}
        self.request_id = request_id
        self.retry_after = retry_after
        self.cause = cause

    def __str__(self) -> str:  # pragma: no cover - simple formatting
        if self.status_code is None:
            return str(self.args[0])
        parts = [f"{self.status_code}"]
        if self.error_code:
            parts.append(self.error_code)
        return " ".join(parts) + f": {self.args[0]}"


class DevdraftValidationError(DevdraftError):
    """Raised locally, before any I/O, when request input is invalid."""


class DevdraftConnectionError(DevdraftError):
    """Raised when no response was received (DNS, refused, reset)."""


class DevdraftTimeoutError(DevdraftConnectionError):
    """Raised when a request exceeds the configured timeout."""


class DevdraftHTTPError(DevdraftError):
    """Raised for HTTP non-success responses."""


class DevdraftBadRequestError(DevdraftHTTPError):
    """HTTP 400."""


class DevdraftAuthError(DevdraftHTTPError):
    """HTTP 401: missing or invalid client key/secret."""


class DevdraftPermissionDeniedError(DevdraftHTTPError):
    """HTTP 403."""


class DevdraftNotFoundError(DevdraftHTTPError):
    """HTTP 404."""


class DevdraftConflictError(DevdraftHTTPError):
    """HTTP 409, e.g. an idempotency key reused with different parameters."""


class DevdraftUnprocessableEntityError(DevdraftHTTPError):
    """HTTP 422."""


class DevdraftRateLimitError(DevdraftHTTPError):
    """Raised for HTTP 429 responses."""


class DevdraftServerError(DevdraftHTTPError):
    """HTTP 5xx."""


STATUS_ERRORS: dict[int, type[DevdraftHTTPError]] = {
    400: DevdraftBadRequestError,
    401: DevdraftAuthError,
    403: DevdraftPermissionDeniedError,
    404: DevdraftNotFoundError,
    409: DevdraftConflictError,
    422: DevdraftUnprocessableEntityError,
    429: DevdraftRateLimitError,
}


def error_class_for_status(status_code: int) -> type[DevdraftHTTPError]:
    if status_code in STATUS_ERRORS:
        return STATUS_ERRORS[status_code]
    if status_code >= 500:
        return DevdraftServerError
    return DevdraftHTTPError
