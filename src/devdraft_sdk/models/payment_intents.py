"""Payment intents: collect from a bank rail or a stablecoin network."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from ._base import DevdraftParams
from .shared import BridgePaymentRail, StableCoinCurrency


class BankSourceCurrency(str, Enum):
    USD = "usd"
    EUR = "eur"
    MXN = "mxn"


class _PaymentIntentCustomer(DevdraftParams):
    amount: str | None = None
    customer_address: str | None = None
    customer_country: str | None = None
    customer_country_iso: str | None = Field(default=None, alias="customer_countryISO")
    customer_email: str | None = None
    customer_first_name: str | None = None
    customer_last_name: str | None = None
    customer_province: str | None = None
    customer_province_iso: str | None = Field(default=None, alias="customer_provinceISO")
    destination_address: str | None = Field(default=None, alias="destinationAddress")
    phone_number: str | None = Field(default=None, alias="phoneNumber")


class PaymentIntentCreateBankParams(_PaymentIntentCustomer):
    destination_currency: StableCoinCurrency = Field(alias="destinationCurrency")
    destination_network: BridgePaymentRail = Field(alias="destinationNetwork")
    source_currency: BankSourceCurrency = Field(alias="sourceCurrency")
    source_payment_rail: BridgePaymentRail = Field(alias="sourcePaymentRail")
    ach_reference: str | None = None
    sepa_reference: str | None = None
    wire_message: str | None = None


class PaymentIntentCreateStableParams(_PaymentIntentCustomer):
    destination_network: BridgePaymentRail = Field(alias="destinationNetwork")
    source_currency: StableCoinCurrency = Field(alias="sourceCurrency")
    source_network: BridgePaymentRail = Field(alias="sourceNetwork")
    destination_currency: StableCoinCurrency | None = Field(default=None, alias="destinationCurrency")
