from __future__ import annotations

from pydantic import Field

from ._base import DevdraftModel, DevdraftParams


class ExchangeRateParams(DevdraftParams):
    from_: str = Field(alias="from")
    to: str


class ExchangeRateResponse(DevdraftModel):
    buy_rate: str
    from_: str = Field(alias="from")
    midmarket_rate: str
    sell_rate: str
    to: str
    timestamp: str | None = None
