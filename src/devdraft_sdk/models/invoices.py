from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import Field

from ._base import DevdraftParams


class InvoiceCurrency(str, Enum):
    USDC = "usdc"
    EURC = "eurc"


class InvoiceDelivery(str, Enum):
    EMAIL = "EMAIL"
    MANUALLY = "MANUALLY"


class InvoicePaymentMethod(str, Enum):
    ACH = "ACH"
    BANK_TRANSFER = "BANK_TRANSFER"
    CREDIT_CARD = "CREDIT_CARD"
    CASH = "CASH"
    MOBILE_MONEY = "MOBILE_MONEY"
    CRYPTO = "CRYPTO"


class InvoiceStatus(str, Enum):
    DRAFT = "DRAFT"
    OPEN = "OPEN"
    PASTDUE = "PASTDUE"
    PAID = "PAID"
    PARTIALLYPAID = "PARTIALLYPAID"


class InvoiceItem(DevdraftParams):
    product_id: str
    quantity: float


class InvoiceCreateParams(DevdraftParams):
    currency: InvoiceCurrency
    customer_id: str
    delivery: InvoiceDelivery
    due_date: datetime
    email: str
    items: list[InvoiceItem]
    name: str
    partial_payment: bool
    payment_link: bool
    payment_methods: list[InvoicePaymentMethod]
    status: InvoiceStatus
    address: str | None = None
    logo: str | None = None
    phone_number: str | None = None
    send_date: datetime | None = None
    tax_id: str | None = Field(default=None, alias="taxId")


class InvoiceUpdateParams(InvoiceCreateParams):
    """Invoices are replaced wholesale (PUT), so the full create payload is required."""


class InvoiceListParams(DevdraftParams):
    skip: int | None = None
    take: int | None = None
