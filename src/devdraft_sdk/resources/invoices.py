from __future__ import annotations

from typing import Any

from .._conversion import parse_request
from ..models import InvoiceCreateParams, InvoiceListParams, InvoiceUpdateParams
from ._resource import APIResource, Options, Params, merge_params


class Invoices(APIResource):
    def create(self, params: Params = None, *, options: Options = None, **fields: Any) -> Any:
        body, request_options = parse_request(InvoiceCreateParams, merge_params(params, fields), options)
        return self._request("POST", "api/v0/invoices", body=body, options=request_options)

    def retrieve(self, invoice_id: str, *, options: Options = None) -> Any:
        return self._request("GET", "api/v0/invoices/{0}", invoice_id, options=options)

    def update(self, invoice_id: str, params: Params = None, *, options: Options = None, **fields: Any) -> Any:
        """Replace an invoice. The full invoice payload is required."""
        body, request_options = parse_request(InvoiceUpdateParams, merge_params(params, fields), options)
        return self._request("PUT", "api/v0/invoices/{0}", invoice_id, body=body, options=request_options)

    def list(self, params: Params = None, *, options: Options = None, **fields: Any) -> Any:
        query, request_options = parse_request(InvoiceListParams, merge_params(params, fields), options)
        return self._request("GET", "api/v0/invoices", query=query, options=request_options)
