from __future__ import annotations

from datetime import datetime
from enum import Enum

from ._base import DevdraftModel


class HealthStatus(str, Enum):
    OK = "ok"
    ERROR = "error"


class DatabaseStatus(str, Enum):
    CONNECTED = "connected"
    ERROR = "error"


class HealthCheckResponse(DevdraftModel):
    """Authenticated health check: includes database connectivity."""

    authenticated: bool
    database: DatabaseStatus | str
    message: str
    status: HealthStatus | str
    timestamp: datetime
    version: str


class HealthCheckPublicResponse(DevdraftModel):
    status: HealthStatus | str
    timestamp: datetime
    version: str
