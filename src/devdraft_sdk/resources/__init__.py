from ._resource import APIResource
from .balance import Balance
from .customers import Customers, LiquidationAddresses
from .exchange_rate import ExchangeRate
from .health import Health
from .invoices import Invoices
from .payment_intents import PaymentIntents
from .payment_links import PaymentLinks
from .products import Products
from .taxes import Taxes
from .test_payment import TestPayment
from .transfers import Transfers
from .v0 import V0
from .webhooks import Webhooks

__all__ = [
    "APIResource",
    "Balance",
    "Customers",
    "ExchangeRate",
    "Health",
    "Invoices",
    "LiquidationAddresses",
    "PaymentIntents",
    "PaymentLinks",
    "Products",
    "Taxes",
    "TestPayment",
    "Transfers",
    "V0",
    "Webhooks",
]
