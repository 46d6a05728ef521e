from __future__ import annotations

from typing import Any

from .._conversion import parse_request
from ..models import PaymentIntentCreateBankParams, PaymentIntentCreateStableParams
from ._resource import APIResource, Options, Params, merge_params


class PaymentIntents(APIResource):
    def create_bank(self, params: Params = None, *, options: Options = None, **fields: Any) -> Any:
        """Collect fiat over a bank rail and settle it in a stablecoin."""
        body, request_options = parse_request(PaymentIntentCreateBankParams, merge_params(params, fields), options)
        return self._request("POST", "api/v0/payment-intents/bank", body=body, options=request_options)

    def create_stable(self, params: Params = None, *, options: Options = None, **fields: Any) -> Any:
        """Collect a stablecoin on one network, optionally settling on another."""
        body, request_options = parse_request(PaymentIntentCreateStableParams, merge_params(params, fields), options)
        return self._request("POST", "api/v0/payment-intents/stablecoin", body=body, options=request_options)
