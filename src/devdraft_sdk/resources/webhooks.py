from __future__ import annotations

from typing import Any, cast

from .._conversion import parse_request
from ..models import WebhookCreateParams, WebhookListParams, WebhookResponse, WebhookUpdateParams
from ._resource import APIResource, Options, Params, merge_params


class Webhooks(APIResource):
    def create(self, params: Params = None, *, options: Options = None, **fields: Any) -> WebhookResponse:
        body, request_options = parse_request(WebhookCreateParams, merge_params(params, fields), options)
        return cast(
            WebhookResponse,
            self._request("POST", "api/v0/webhooks", body=body, options=request_options, cast_to=WebhookResponse),
        )

    def retrieve(self, webhook_id: str, *, options: Options = None) -> WebhookResponse:
        return cast(
            WebhookResponse,
            self._request("GET", "api/v0/webhooks/{0}", webhook_id, options=options, cast_to=WebhookResponse),
        )

    def update(self, webhook_id: str, params: Params = None, *, options: Options = None, **fields: Any) -> WebhookResponse:
        body, request_options = parse_request(WebhookUpdateParams, merge_params(params, fields), options)
        return cast(
            WebhookResponse,
            self._request(
                "PATCH",
                "api/v0/webhooks/{0}",
                webhook_id,
                body=body,
                options=request_options,
                cast_to=WebhookResponse,
            ),
        )

    def list(self, params: Params = None, *, options: Options = None, **fields: Any) -> list[WebhookResponse]:
        query, request_options = parse_request(WebhookListParams, merge_params(params, fields), options)
        return cast(
            "list[WebhookResponse]",
            self._request(
                "GET",
                "api/v0/webhooks",
                query=query,
                options=request_options,
                cast_to=list[WebhookResponse],
            ),
        )

    def delete(self, webhook_id: str, *, options: Options = None) -> WebhookResponse:
        return cast(
            WebhookResponse,
            self._request("DELETE", "api/v0/webhooks/{0}", webhook_id, options=options, cast_to=WebhookResponse),
        )
