from __future__ import annotations

from typing import Any

from .._conversion import parse_request
from ..models import PaymentLinkCreateParams, PaymentLinkListParams
from ._resource import APIResource, Options, Params, merge_params


class PaymentLinks(APIResource):
    def create(self, params: Params = None, *, options: Options = None, **fields: Any) -> Any:
        body, request_options = parse_request(PaymentLinkCreateParams, merge_params(params, fields), options)
        return self._request("POST", "api/v0/payment-links", body=body, options=request_options)

    def retrieve(self, payment_link_id: str, *, options: Options = None) -> Any:
        return self._request("GET", "api/v0/payment-links/{0}", payment_link_id, options=options)

    def update(self, payment_link_id: str, *, options: Options = None) -> Any:
        # The endpoint takes no documented body.
        return self._request("PUT", "api/v0/payment-links/{0}", payment_link_id, options=options)

    def list(self, params: Params = None, *, options: Options = None, **fields: Any) -> Any:
        query, request_options = parse_request(PaymentLinkListParams, merge_params(params, fields), options)
        return self._request("GET", "api/v0/payment-links", query=query, options=request_options)
