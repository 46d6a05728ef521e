"""Customers and their liquidation addresses."""

from __future__ import annotations

from enum import Enum

from ._base import DevdraftModel, DevdraftParams
from .shared import BridgePaymentRail


class CustomerType(str, Enum):
    INDIVIDUAL = "Individual"
    STARTUP = "Startup"
    SMALL_BUSINESS = "Small Business"
    MEDIUM_BUSINESS = "Medium Business"
    ENTERPRISE = "Enterprise"
    NON_PROFIT = "Non-Profit"
    GOVERNMENT = "Government"


class CustomerStatus(str, Enum):
    ACTIVE = "ACTIVE"
    BLACKLISTED = "BLACKLISTED"
    DEACTIVATED = "DEACTIVATED"
    DELETED = "DELETED"


class CustomerCreateParams(DevdraftParams):
    first_name: str
    last_name: str
    phone_number: str
    customer_type: CustomerType | None = None
    email: str | None = None
    status: CustomerStatus | None = None


class CustomerUpdateParams(DevdraftParams):
    customer_type: CustomerType | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    status: CustomerStatus | None = None


class CustomerListParams(DevdraftParams):
    email: str | None = None
    name: str | None = None
    skip: int | None = None
    status: CustomerStatus | None = None
    take: int | None = None


class LiquidationChain(str, Enum):
    ETHEREUM = "ethereum"
    SOLANA = "solana"
    POLYGON = "polygon"
    AVALANCHE_C_CHAIN = "avalanche_c_chain"
    BASE = "base"
    ARBITRUM = "arbitrum"
    OPTIMISM = "optimism"
    STELLAR = "stellar"
    TRON = "tron"


class LiquidationCurrency(str, Enum):
    USDC = "usdc"
    EURC = "eurc"
    DAI = "dai"
    PYUSD = "pyusd"
    USDT = "usdt"


class LiquidationDestinationCurrency(str, Enum):
    USD = "usd"
    EUR = "eur"
    MXN = "mxn"
    USDC = "usdc"
    EURC = "eurc"
    DAI = "dai"
    PYUSD = "pyusd"
    USDT = "usdt"


class LiquidationAddressCreateParams(DevdraftParams):
    """Address that converts incoming crypto and forwards it to a destination."""

    address: str
    chain: LiquidationChain
    currency: LiquidationCurrency
    bridge_wallet_id: str | None = None
    custom_developer_fee_percent: str | None = None
    destination_ach_reference: str | None = None
    destination_address: str | None = None
    destination_blockchain_memo: str | None = None
    destination_currency: LiquidationDestinationCurrency | None = None
    destination_payment_rail: BridgePaymentRail | None = None
    destination_sepa_reference: str | None = None
    destination_wire_message: str | None = None
    external_account_id: str | None = None
    prefunded_account_id: str | None = None
    return_address: str | None = None


class LiquidationAddressResponse(DevdraftModel):
    id: str
    address: str
    chain: str
    created_at: str
    currency: str
    customer_id: str
    state: str
    updated_at: str
    bridge_wallet_id: str | None = None
    custom_developer_fee_percent: str | None = None
    destination_currency: str | None = None
    destination_payment_rail: str | None = None
    external_account_id: str | None = None
    prefunded_account_id: str | None = None
