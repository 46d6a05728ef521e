from __future__ import annotations

from typing import cast

from ..models import HealthCheckPublicResponse, HealthCheckResponse
from ._resource import APIResource, Options


class Health(APIResource):
    def check(self, *, options: Options = None) -> HealthCheckResponse:
        """Authenticated health check, including database connectivity."""
        return cast(
            HealthCheckResponse,
            self._request("GET", "api/v0/health", options=options, cast_to=HealthCheckResponse),
        )

    def check_public(self, *, options: Options = None) -> HealthCheckPublicResponse:
        return cast(
            HealthCheckPublicResponse,
            self._request("GET", "api/v0/health/public", options=options, cast_to=HealthCheckPublicResponse),
        )
