from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import Field

from ._base import DevdraftParams


class PaymentLinkCurrency(str, Enum):
    USDC = "usdc"
    EURC = "eurc"


class PaymentLinkType(str, Enum):
    INVOICE = "INVOICE"
    PRODUCT = "PRODUCT"
    COLLECTION = "COLLECTION"
    DONATION = "DONATION"


class PaymentLinkProduct(DevdraftParams):
    product_id: str = Field(alias="productId")
    quantity: int


class PaymentLinkCreateParams(DevdraftParams):
    allow_mobile_payment: bool = Field(alias="allowMobilePayment")
    allow_quantity_adjustment: bool = Field(alias="allowQuantityAdjustment")
    collect_address: bool = Field(alias="collectAddress")
    collect_tax: bool = Field(alias="collectTax")
    currency: PaymentLinkCurrency
    link_type: PaymentLinkType = Field(alias="linkType")
    title: str
    url: str
    amount: float | None = None
    cover_image: str | None = Field(default=None, alias="coverImage")
    customer_id: str | None = Field(default=None, alias="customerId")
    # Provider-defined shape, sent untouched.
    custom_fields: Any = Field(default=None, alias="customFields")
    description: str | None = None
    expiration_date: datetime | None = None
    is_for_all_product: bool | None = Field(default=None, alias="isForAllProduct")
    limit_payments: bool | None = Field(default=None, alias="limitPayments")
    max_payments: int | None = Field(default=None, alias="maxPayments")
    payment_for_id: str | None = Field(default=None, alias="paymentForId")
    payment_link_products: list[PaymentLinkProduct] | None = Field(default=None, alias="paymentLinkProducts")
    tax_id: str | None = Field(default=None, alias="taxId")


class PaymentLinkListParams(DevdraftParams):
    skip: str | None = None
    take: str | None = None
