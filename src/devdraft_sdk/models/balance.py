from __future__ import annotations

from enum import Enum
from typing import Any

from ._base import DevdraftModel


class BalanceCurrency(str, Enum):
    USDC = "usdc"
    EURC = "eurc"


class AggregatedBalance(DevdraftModel):
    """Total for one stablecoin across every wallet and chain."""

    # Per wallet/chain breakdown, passed through as returned.
    balances: list[Any]
    currency: BalanceCurrency | str
    total_balance: str


class AllStablecoinBalances(DevdraftModel):
    eurc: AggregatedBalance
    total_usd_value: str
    usdc: AggregatedBalance
