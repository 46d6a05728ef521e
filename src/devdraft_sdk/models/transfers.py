from __future__ import annotations

from enum import Enum

from pydantic import Field

from ._base import DevdraftParams


class ExternalBankPaymentRail(str, Enum):
    ACH = "ach"
    ACH_PUSH = "ach_push"
    ACH_SAME_DAY = "ach_same_day"
    WIRE = "wire"
    SEPA = "sepa"
    SWIFT = "swift"
    SPEI = "spei"


class TransferCreateDirectBankParams(DevdraftParams):
    amount: float
    destination_currency: str = Field(alias="destinationCurrency")
    payment_rail: str = Field(alias="paymentRail")
    source_currency: str = Field(alias="sourceCurrency")
    wallet_id: str = Field(alias="walletId")
    ach_reference: str | None = None
    sepa_reference: str | None = None
    wire_message: str | None = None


class TransferCreateDirectWalletParams(DevdraftParams):
    amount: float
    network: str
    stable_coin_currency: str = Field(alias="stableCoinCurrency")
    wallet_id: str = Field(alias="walletId")


class TransferCreateExternalBankTransferParams(DevdraftParams):
    destination_currency: str = Field(alias="destinationCurrency")
    destination_payment_rail: ExternalBankPaymentRail = Field(alias="destinationPaymentRail")
    external_account_id: str
    source_currency: str = Field(alias="sourceCurrency")
    source_wallet_id: str = Field(alias="sourceWalletId")
    ach_reference: str | None = None
    amount: float | None = None
    sepa_reference: str | None = None
    spei_reference: str | None = None
    swift_charges: str | None = None
    swift_reference: str | None = None
    wire_message: str | None = None


class TransferCreateExternalStablecoinTransferParams(DevdraftParams):
    beneficiary_id: str = Field(alias="beneficiaryId")
    destination_currency: str = Field(alias="destinationCurrency")
    source_currency: str = Field(alias="sourceCurrency")
    source_wallet_id: str = Field(alias="sourceWalletId")
    amount: float | None = None
    blockchain_memo: str | None = None


class TransferCreateStablecoinConversionParams(DevdraftParams):
    amount: float
    destination_currency: str = Field(alias="destinationCurrency")
    source_currency: str = Field(alias="sourceCurrency")
    source_network: str = Field(alias="sourceNetwork")
    wallet_id: str = Field(alias="walletId")
