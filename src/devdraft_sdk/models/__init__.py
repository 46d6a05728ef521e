"""Typed request parameter records and response records."""

from ._base import DevdraftModel, DevdraftParams
from .balance import AggregatedBalance, AllStablecoinBalances, BalanceCurrency
from .customers import (
    CustomerCreateParams,
    CustomerListParams,
    CustomerStatus,
    CustomerType,
    CustomerUpdateParams,
    LiquidationAddressCreateParams,
    LiquidationAddressResponse,
    LiquidationChain,
    LiquidationCurrency,
    LiquidationDestinationCurrency,
)
from .exchange_rate import ExchangeRateParams, ExchangeRateResponse
from .health import DatabaseStatus, HealthCheckPublicResponse, HealthCheckResponse, HealthStatus
from .invoices import (
    InvoiceCreateParams,
    InvoiceCurrency,
    InvoiceDelivery,
    InvoiceItem,
    InvoiceListParams,
    InvoicePaymentMethod,
    InvoiceStatus,
    InvoiceUpdateParams,
)
from .payment_intents import BankSourceCurrency, PaymentIntentCreateBankParams, PaymentIntentCreateStableParams
from .payment_links import (
    PaymentLinkCreateParams,
    PaymentLinkCurrency,
    PaymentLinkListParams,
    PaymentLinkProduct,
    PaymentLinkType,
)
from .products import ProductCreateParams, ProductCurrency, ProductListParams, ProductUpdateParams
from .shared import BridgePaymentRail, StableCoinCurrency
from .taxes import TaxCreateParams, TaxListParams, TaxResponse, TaxUpdateParams
from .test_payment import PaymentResponse, RefundResponse, TestPaymentProcessParams
from .transfers import (
    ExternalBankPaymentRail,
    TransferCreateDirectBankParams,
    TransferCreateDirectWalletParams,
    TransferCreateExternalBankTransferParams,
    TransferCreateExternalStablecoinTransferParams,
    TransferCreateStablecoinConversionParams,
)
from .webhooks import WebhookCreateParams, WebhookListParams, WebhookResponse, WebhookUpdateParams

__all__ = [
    "AggregatedBalance",
    "AllStablecoinBalances",
    "BalanceCurrency",
    "BankSourceCurrency",
    "BridgePaymentRail",
    "CustomerCreateParams",
    "CustomerListParams",
    "CustomerStatus",
    "CustomerType",
    "CustomerUpdateParams",
    "DatabaseStatus",
    "DevdraftModel",
    "DevdraftParams",
    "ExchangeRateParams",
    "ExchangeRateResponse",
    "ExternalBankPaymentRail",
    "HealthCheckPublicResponse",
    "HealthCheckResponse",
    "HealthStatus",
    "InvoiceCreateParams",
    "InvoiceCurrency",
    "InvoiceDelivery",
    "InvoiceItem",
    "InvoiceListParams",
    "InvoicePaymentMethod",
    "InvoiceStatus",
    "InvoiceUpdateParams",
    "LiquidationAddressCreateParams",
    "LiquidationAddressResponse",
    "LiquidationChain",
    "LiquidationCurrency",
    "LiquidationDestinationCurrency",
    "PaymentIntentCreateBankParams",
    "PaymentIntentCreateStableParams",
    "PaymentLinkCreateParams",
    "PaymentLinkCurrency",
    "PaymentLinkListParams",
    "PaymentLinkProduct",
    "PaymentLinkType",
    "PaymentResponse",
    "ProductCreateParams",
    "ProductCurrency",
    "ProductListParams",
    "ProductUpdateParams",
    "RefundResponse",
    "StableCoinCurrency",
    "TaxCreateParams",
    "TaxListParams",
    "TaxResponse",
    "TaxUpdateParams",
    "TestPaymentProcessParams",
    "TransferCreateDirectBankParams",
    "TransferCreateDirectWalletParams",
    "TransferCreateExternalBankTransferParams",
    "TransferCreateExternalStablecoinTransferParams",
    "TransferCreateStablecoinConversionParams",
    "WebhookCreateParams",
    "WebhookListParams",
    "WebhookResponse",
    "WebhookUpdateParams",
]
