from __future__ import annotations

from typing import Any, cast

from .._conversion import parse_request
from ..models import ExchangeRateParams, ExchangeRateResponse
from ._resource import APIResource, Options, Params, merge_params


class ExchangeRate(APIResource):
    def get_eur_to_usd(self, *, options: Options = None) -> ExchangeRateResponse:
        return cast(
            ExchangeRateResponse,
            self._request("GET", "api/v0/exchange-rate/eur-to-usd", options=options, cast_to=ExchangeRateResponse),
        )

    def get_exchange_rate(self, params: Params = None, *, options: Options = None, **fields: Any) -> ExchangeRateResponse:
        """Rate between two currencies, e.g. ``get_exchange_rate({"from": "USD", "to": "EUR"})``."""
        query, request_options = parse_request(ExchangeRateParams, merge_params(params, fields), options)
        return cast(
            ExchangeRateResponse,
            self._request(
                "GET",
                "api/v0/exchange-rate",
                query=query,
                options=request_options,
                cast_to=ExchangeRateResponse,
            ),
        )

    def get_usd_to_eur(self, *, options: Options = None) -> ExchangeRateResponse:
        return cast(
            ExchangeRateResponse,
            self._request("GET", "api/v0/exchange-rate/usd-to-eur", options=options, cast_to=ExchangeRateResponse),
        )
