from __future__ import annotations

from typing import Any, cast

from .._conversion import parse_request
from ..models import TaxCreateParams, TaxListParams, TaxResponse, TaxUpdateParams
from ._resource import APIResource, Options, Params, merge_params


class Taxes(APIResource):
    def create(self, params: Params = None, *, options: Options = None, **fields: Any) -> TaxResponse:
        body, request_options = parse_request(TaxCreateParams, merge_params(params, fields), options)
        return cast(
            TaxResponse,
            self._request("POST", "api/v0/taxes", body=body, options=request_options, cast_to=TaxResponse),
        )

    def retrieve(self, tax_id: str, *, options: Options = None) -> Any:
        return self._request("GET", "api/v0/taxes/{0}", tax_id, options=options)

    def update(self, tax_id: str, params: Params = None, *, options: Options = None, **fields: Any) -> Any:
        body, request_options = parse_request(TaxUpdateParams, merge_params(params, fields), options)
        return self._request("PUT", "api/v0/taxes/{0}", tax_id, body=body, options=request_options)

    def list(self, params: Params = None, *, options: Options = None, **fields: Any) -> Any:
        query, request_options = parse_request(TaxListParams, merge_params(params, fields), options)
        return self._request("GET", "api/v0/taxes", query=query, options=request_options)

    def delete(self, tax_id: str, *, options: Options = None) -> Any:
        return self._request("DELETE", "api/v0/taxes/{0}", tax_id, options=options)

    def delete_all(self, *, options: Options = None) -> Any:
        return self._request("DELETE", "api/v0/taxes", options=options)

    def update_all(self, *, options: Options = None) -> Any:
        return self._request("PUT", "api/v0/taxes", options=options)
