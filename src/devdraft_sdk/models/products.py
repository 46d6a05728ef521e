from __future__ import annotations

from enum import Enum

from pydantic import Field

from ._base import DevdraftParams


class ProductCurrency(str, Enum):
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    CAD = "CAD"
    AUD = "AUD"
    JPY = "JPY"


class ProductCreateParams(DevdraftParams):
    description: str
    name: str
    price: float
    currency: ProductCurrency | None = None
    images: list[str] | None = None
    product_type: str | None = Field(default=None, alias="productType")
    quantity: float | None = None
    status: str | None = None
    stock_count: float | None = Field(default=None, alias="stockCount")
    type: str | None = None
    unit: str | None = None
    weight: float | None = None


class ProductUpdateParams(DevdraftParams):
    currency: ProductCurrency | None = None
    description: str | None = None
    images: list[str] | None = None
    name: str | None = None
    price: float | None = None
    product_type: str | None = Field(default=None, alias="productType")
    quantity: float | None = None
    status: str | None = None
    stock_count: float | None = Field(default=None, alias="stockCount")
    type: str | None = None
    unit: str | None = None
    weight: float | None = None


class ProductListParams(DevdraftParams):
    skip: int | None = None
    take: int | None = None
