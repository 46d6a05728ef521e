"""Python client for the Devdraft payments API."""

from .client import DevdraftClient
from .config import DEFAULT_BASE_URL, ClientConfig, __version__
from .exceptions import (
    DevdraftAuthError,
    DevdraftBadRequestError,
    DevdraftConflictError,
    DevdraftConnectionError,
    DevdraftError,
    DevdraftHTTPError,
    DevdraftNotFoundError,
    DevdraftPermissionDeniedError,
    DevdraftRateLimitError,
    DevdraftServerError,
    DevdraftTimeoutError,
    DevdraftUnprocessableEntityError,
    DevdraftValidationError,
)
from .request_options import RequestOptions
from .response import APIResponse

__all__ = [
    "APIResponse",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DevdraftAuthError",
    "DevdraftBadRequestError",
    "DevdraftClient",
    "DevdraftConflictError",
    "DevdraftConnectionError",
    "DevdraftError",
    "DevdraftHTTPError",
    "DevdraftNotFoundError",
    "DevdraftPermissionDeniedError",
    "DevdraftRateLimitError",
    "DevdraftServerError",
    "DevdraftTimeoutError",
    "DevdraftUnprocessableEntityError",
    "DevdraftValidationError",
    "RequestOptions",
    "__version__",
]
