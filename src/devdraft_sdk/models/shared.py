"""Vocabularies shared across several resources."""

from __future__ import annotations

from enum import Enum


class StableCoinCurrency(str, Enum):
    USDC = "usdc"
    EURC = "eurc"


class BridgePaymentRail(str, Enum):
    """Blockchains and fiat rails understood by the bridge."""

    ETHEREUM = "ethereum"
    SOLANA = "solana"
    POLYGON = "polygon"
    AVALANCHE_C_CHAIN = "avalanche_c_chain"
    BASE = "base"
    ARBITRUM = "arbitrum"
    OPTIMISM = "optimism"
    STELLAR = "stellar"
    TRON = "tron"
    BRIDGE_WALLET = "bridge_wallet"
    WIRE = "wire"
    ACH = "ach"
    ACH_PUSH = "ach_push"
    ACH_SAME_DAY = "ach_same_day"
    SEPA = "sepa"
    SWIFT = "swift"
    SPEI = "spei"
