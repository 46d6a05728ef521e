from __future__ import annotations

from typing import Any

from .._conversion import parse_request
from ..models import (
    TransferCreateDirectBankParams,
    TransferCreateDirectWalletParams,
    TransferCreateExternalBankTransferParams,
    TransferCreateExternalStablecoinTransferParams,
    TransferCreateStablecoinConversionParams,
)
from ._resource import APIResource, Options, Params, merge_params


class Transfers(APIResource):
    """Move funds out of a bridge wallet. Every method is a POST with a JSON body."""

    def create_direct_bank(self, params: Params = None, *, options: Options = None, **fields: Any) -> Any:
        body, request_options = parse_request(TransferCreateDirectBankParams, merge_params(params, fields), options)
        return self._request("POST", "api/v0/transfers/direct-bank", body=body, options=request_options)

    def create_direct_wallet(self, params: Params = None, *, options: Options = None, **fields: Any) -> Any:
        body, request_options = parse_request(TransferCreateDirectWalletParams, merge_params(params, fields), options)
        return self._request("POST", "api/v0/transfers/direct-wallet", body=body, options=request_options)

    def create_external_bank_transfer(self, params: Params = None, *, options: Options = None, **fields: Any) -> Any:
        body, request_options = parse_request(
            TransferCreateExternalBankTransferParams, merge_params(params, fields), options
        )
        return self._request("POST", "api/v0/transfers/external-bank-transfer", body=body, options=request_options)

    def create_external_stablecoin_transfer(
        self, params: Params = None, *, options: Options = None, **fields: Any
    ) -> Any:
        body, request_options = parse_request(
            TransferCreateExternalStablecoinTransferParams, merge_params(params, fields), options
        )
        return self._request(
            "POST", "api/v0/transfers/external-stablecoin-transfer", body=body, options=request_options
        )

    def create_stablecoin_conversion(self, params: Params = None, *, options: Options = None, **fields: Any) -> Any:
        body, request_options = parse_request(
            TransferCreateStablecoinConversionParams, merge_params(params, fields), options
        )
        return self._request("POST", "api/v0/transfers/stablecoin-conversion", body=body, options=request_options)
