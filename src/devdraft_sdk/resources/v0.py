from __future__ import annotations

from typing import TYPE_CHECKING

from .balance import Balance
from .customers import Customers
from .exchange_rate import ExchangeRate
from .health import Health
from .invoices import Invoices
from .payment_intents import PaymentIntents
from .payment_links import PaymentLinks
from .products import Products
from .taxes import Taxes
from .test_payment import TestPayment
from .transfers import Transfers
from .webhooks import Webhooks

if TYPE_CHECKING:
    from ..client import DevdraftClient


class V0:
    """Services under ``/api/v0``."""

    def __init__(self, client: "DevdraftClient") -> None:
        self.health = Health(client)
        self.customers = Customers(client)
        self.invoices = Invoices(client)
        self.payment_links = PaymentLinks(client)
        self.payment_intents = PaymentIntents(client)
        self.webhooks = Webhooks(client)
        self.transfers = Transfers(client)
        self.balance = Balance(client)
        self.exchange_rate = ExchangeRate(client)
        self.products = Products(client)
        self.taxes = Taxes(client)
        self.test_payment = TestPayment(client)
