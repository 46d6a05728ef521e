from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from .._conversion import parse_request
from ..models import (
    CustomerCreateParams,
    CustomerListParams,
    CustomerUpdateParams,
    LiquidationAddressCreateParams,
    LiquidationAddressResponse,
)
from ._resource import APIResource, Options, Params, merge_params

if TYPE_CHECKING:
    from ..client import DevdraftClient


class LiquidationAddresses(APIResource):
    def create(
        self,
        customer_id: str,
        params: Params = None,
        *,
        options: Options = None,
        **fields: Any,
    ) -> LiquidationAddressResponse:
        body, request_options = parse_request(LiquidationAddressCreateParams, merge_params(params, fields), options)
        return cast(
            LiquidationAddressResponse,
            self._request(
                "POST",
                "api/v0/customers/{0}/liquidation_addresses",
                customer_id,
                body=body,
                options=request_options,
                cast_to=LiquidationAddressResponse,
            ),
        )

    def retrieve(
        self,
        liquidation_address_id: str,
        *,
        customer_id: str,
        options: Options = None,
    ) -> LiquidationAddressResponse:
        return cast(
            LiquidationAddressResponse,
            self._request(
                "GET",
                "api/v0/customers/{0}/liquidation_addresses/{1}",
                customer_id,
                liquidation_address_id,
                options=options,
                cast_to=LiquidationAddressResponse,
            ),
        )

    def list(self, customer_id: str, *, options: Options = None) -> list[LiquidationAddressResponse]:
        return cast(
            "list[LiquidationAddressResponse]",
            self._request(
                "GET",
                "api/v0/customers/{0}/liquidation_addresses",
                customer_id,
                options=options,
                cast_to=list[LiquidationAddressResponse],
            ),
        )


class Customers(APIResource):
    """Customer records. Responses are returned as decoded JSON."""

    def __init__(self, client: "DevdraftClient", *, raw: bool = False) -> None:
        super().__init__(client, raw=raw)
        self.liquidation_addresses = LiquidationAddresses(client, raw=raw)

    def create(self, params: Params = None, *, options: Options = None, **fields: Any) -> Any:
        body, request_options = parse_request(CustomerCreateParams, merge_params(params, fields), options)
        return self._request("POST", "api/v0/customers", body=body, options=request_options)

    def retrieve(self, customer_id: str, *, options: Options = None) -> Any:
        return self._request("GET", "api/v0/customers/{0}", customer_id, options=options)

    def update(self, customer_id: str, params: Params = None, *, options: Options = None, **fields: Any) -> Any:
        body, request_options = parse_request(CustomerUpdateParams, merge_params(params, fields), options)
        return self._request("PATCH", "api/v0/customers/{0}", customer_id, body=body, options=request_options)

    def list(self, params: Params = None, *, options: Options = None, **fields: Any) -> Any:
        query, request_options = parse_request(CustomerListParams, merge_params(params, fields), options)
        return self._request("GET", "api/v0/customers", query=query, options=request_options)
