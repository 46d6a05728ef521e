from __future__ import annotations

from typing import cast

from ..models import AggregatedBalance, AllStablecoinBalances
from ._resource import APIResource, Options


class Balance(APIResource):
    def get_all_stablecoin_balances(self, *, options: Options = None) -> AllStablecoinBalances:
        return cast(
            AllStablecoinBalances,
            self._request("GET", "api/v0/balance", options=options, cast_to=AllStablecoinBalances),
        )

    def get_eurc(self, *, options: Options = None) -> AggregatedBalance:
        return cast(AggregatedBalance, self._request("GET", "api/v0/balance/eurc", options=options, cast_to=AggregatedBalance))

    def get_usdc(self, *, options: Options = None) -> AggregatedBalance:
        return cast(AggregatedBalance, self._request("GET", "api/v0/balance/usdc", options=options, cast_to=AggregatedBalance))
