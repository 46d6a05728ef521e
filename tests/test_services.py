from __future__ import annotations

import json
import re

import httpx
import pytest

from devdraft_sdk import DevdraftClient, DevdraftValidationError
from devdraft_sdk.contracts import SDK_ENDPOINT_COVERAGE
from devdraft_sdk.models import (
    AllStablecoinBalances,
    CustomerCreateParams,
    ExchangeRateResponse,
    HealthCheckResponse,
    LiquidationAddressResponse,
    PaymentResponse,
    RefundResponse,
    WebhookResponse,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("DEVDRAFT_API_KEY", "DEVDRAFT_SECRET", "DEVDRAFT_IDEMPOTENCY_KEY", "DEVDRAFT_BASE_URL"):
        monkeypatch.delenv(name, raising=False)


class Recorder:
    """Mock transport that records requests and replies with queued payloads."""

    def __init__(self, *responses: httpx.Response) -> None:
        self.requests: list[httpx.Request] = []
        self._responses = list(responses)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if self._responses:
            return self._responses.pop(0)
        return httpx.Response(200, json={})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def client(self) -> DevdraftClient:
        return DevdraftClient(
            api_key="key_test",
            secret="secret_test",
            httpx_client=httpx.Client(transport=httpx.MockTransport(self)),
        )


_ID_SEGMENT = re.compile(r"/id_\d+")


def _body(request: httpx.Request) -> dict:
    return json.loads(request.content)


WEBHOOK = {
    "id": "wh_1",
    "created_at": "2024-01-01T00:00:00Z",
    "delivery_stats": {"delivered": 1, "failed": 0},
    "encrypted": False,
    "isActive": True,
    "name": "orders",
    "updated_at": "2024-01-01T00:00:00Z",
    "url": "https://example.com/hooks/orders",
}


def test_create_customer_sends_only_given_fields() -> None:
    recorder = Recorder(httpx.Response(201, json={"id": "cus_1", "first_name": "Ada"}))

    with recorder.client() as client:
        customer = client.v0.customers.create(
            {"first_name": "Ada", "last_name": "Lovelace", "phone_number": "+15550100"}
        )

    request = recorder.last
    assert request.method == "POST"
    assert request.url.path == "/api/v0/customers"
    assert _body(request) == {"first_name": "Ada", "last_name": "Lovelace", "phone_number": "+15550100"}
    assert customer == {"id": "cus_1", "first_name": "Ada"}


def test_create_customer_accepts_a_record_and_keyword_overrides() -> None:
    recorder = Recorder()
    record = CustomerCreateParams(first_name="Ada", last_name="Lovelace", phone_number="+1")

    with recorder.client() as client:
        client.v0.customers.create(record, status="ACTIVE", customer_type="Startup")

    assert _body(recorder.last) == {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "phone_number": "+1",
        "customer_type": "Startup",
        "status": "ACTIVE",
    }


def test_list_webhooks_paginates_with_query_and_decodes_records() -> None:
    recorder = Recorder(httpx.Response(200, json=[WEBHOOK, {**WEBHOOK, "id": "wh_2", "isActive": False}]))

    with recorder.client() as client:
        webhooks = client.v0.webhooks.list(skip=0, take=10)

    assert recorder.last.url.query == b"skip=0&take=10"
    assert [type(w) for w in webhooks] == [WebhookResponse, WebhookResponse]
    assert [w.id for w in webhooks] == ["wh_1", "wh_2"]
    assert webhooks[1].is_active is False


def test_test_payment_forwards_idempotency_key_verbatim() -> None:
    payment = {"id": "pay_1", "amount": 100.0, "currency": "USD", "status": "succeeded", "timestamp": "2024-01-01"}
    recorder = Recorder(httpx.Response(201, json=payment), httpx.Response(201, json=payment))

    with recorder.client() as client:
        first = client.v0.test_payment.process(
            amount=100, currency="USD", description="order 42", idempotency_key="order-42"
        )
        second = client.v0.test_payment.process(
            amount=100, currency="USD", description="order 42", idempotency_key="order-42"
        )

    assert [r.headers["idempotency-key"] for r in recorder.requests] == ["order-42", "order-42"]
    assert _body(recorder.requests[0]) == {"amount": 100.0, "currency": "USD", "description": "order 42"}
    assert isinstance(first, PaymentResponse)
    assert first == second


def test_refund_uses_payment_path_and_idempotency_key() -> None:
    recorder = Recorder(
        httpx.Response(
            201,
            json={"id": "ref_1", "amount": 100, "paymentId": "pay_1", "status": "refunded", "timestamp": "now"},
        )
    )

    with recorder.client() as client:
        refund = client.v0.test_payment.refund("pay_1", idempotency_key="refund-1")

    assert recorder.last.url.path == "/api/v0/test-payment/pay_1/refund"
    assert recorder.last.headers["idempotency-key"] == "refund-1"
    assert isinstance(refund, RefundResponse)
    assert refund.payment_id == "pay_1"


def test_liquidation_addresses_are_nested_under_customer() -> None:
    address = {
        "id": "liq_1",
        "address": "0xabc",
        "chain": "ethereum",
        "created_at": "2024-01-01",
        "currency": "usdc",
        "customer_id": "cus_1",
        "state": "active",
        "updated_at": "2024-01-01",
    }
    recorder = Recorder(httpx.Response(201, json=address), httpx.Response(200, json=[address]))

    with recorder.client() as client:
        created = client.v0.customers.liquidation_addresses.create(
            "cus_1", address="0xabc", chain="ethereum", currency="usdc", destination_payment_rail="ach"
        )
        listed = client.v0.customers.liquidation_addresses.list("cus_1")

    assert recorder.requests[0].url.path == "/api/v0/customers/cus_1/liquidation_addresses"
    assert _body(recorder.requests[0]) == {
        "address": "0xabc",
        "chain": "ethereum",
        "currency": "usdc",
        "destination_payment_rail": "ach",
    }
    assert isinstance(created, LiquidationAddressResponse)
    assert created.state == "active"
    assert [a.id for a in listed] == ["liq_1"]


def test_liquidation_address_chain_is_validated() -> None:
    recorder = Recorder()

    with recorder.client() as client, pytest.raises(DevdraftValidationError, match="chain"):
        client.v0.customers.liquidation_addresses.create("cus_1", address="0xabc", chain="dogecoin", currency="usdc")

    assert recorder.requests == []


def test_payment_link_uses_camel_case_wire_names() -> None:
    recorder = Recorder()

    with recorder.client() as client:
        client.v0.payment_links.create(
            allow_mobile_payment=True,
            allow_quantity_adjustment=False,
            collect_address=False,
            collect_tax=True,
            currency="usdc",
            link_type="PRODUCT",
            title="Sticker pack",
            url="https://pay.example.com/stickers",
            payment_for_id="prod_1",
        )

    assert _body(recorder.last) == {
        "allowMobilePayment": True,
        "allowQuantityAdjustment": False,
        "collectAddress": False,
        "collectTax": True,
        "currency": "usdc",
        "linkType": "PRODUCT",
        "title": "Sticker pack",
        "url": "https://pay.example.com/stickers",
        "paymentForId": "prod_1",
    }


def test_bank_payment_intent_body() -> None:
    recorder = Recorder()

    with recorder.client() as client:
        client.v0.payment_intents.create_bank(
            destination_currency="usdc",
            destination_network="base",
            source_currency="usd",
            source_payment_rail="ach_push",
            amount="25.00",
            customer_country_iso="US",
        )

    assert recorder.last.url.path == "/api/v0/payment-intents/bank"
    body = _body(recorder.last)
    assert body["destinationCurrency"] == "usdc"
    assert body["sourcePaymentRail"] == "ach_push"
    assert body["customer_countryISO"] == "US"
    assert body["amount"] == "25.00"


def test_exchange_rate_query_uses_reserved_word_name() -> None:
    rate = {"buy_rate": "1.08", "from": "EUR", "midmarket_rate": "1.079", "sell_rate": "1.07", "to": "USD"}
    recorder = Recorder(httpx.Response(200, json=rate))

    with recorder.client() as client:
        result = client.v0.exchange_rate.get_exchange_rate({"from": "EUR", "to": "USD"})

    assert recorder.last.url.params["from"] == "EUR"
    assert recorder.last.url.params["to"] == "USD"
    assert isinstance(result, ExchangeRateResponse)
    assert result.from_ == "EUR"


def test_health_check_decodes_typed_response() -> None:
    recorder = Recorder(
        httpx.Response(
            200,
            json={
                "authenticated": True,
                "database": "connected",
                "message": "all good",
                "status": "ok",
                "timestamp": "2024-01-01T00:00:00Z",
                "version": "2.3.0",
            },
        )
    )

    with recorder.client() as client:
        health = client.v0.health.check()

    assert isinstance(health, HealthCheckResponse)
    assert health.authenticated is True
    assert health.database == "connected"


def test_balances_decode_nested_aggregates() -> None:
    aggregate = {"balances": [{"wallet": "w1", "amount": "10"}], "currency": "usdc", "total_balance": "10"}
    recorder = Recorder(
        httpx.Response(
            200,
            json={"usdc": aggregate, "eurc": {**aggregate, "currency": "eurc"}, "total_usd_value": "20.8"},
        )
    )

    with recorder.client() as client:
        balances = client.v0.balance.get_all_stablecoin_balances()

    assert isinstance(balances, AllStablecoinBalances)
    assert balances.usdc.total_balance == "10"
    assert balances.eurc.currency == "eurc"


def test_product_create_is_sent_as_multipart_form() -> None:
    recorder = Recorder()

    with recorder.client() as client:
        client.v0.products.create(
            name="Mug",
            description="Ceramic mug",
            price=12.5,
            currency="USD",
            stock_count=3,
            files=[("mug.png", b"\x89PNG", "image/png")],
        )

    request = recorder.last
    content = request.content.decode("latin-1")
    assert request.headers["content-type"].startswith("multipart/form-data; boundary=")
    assert 'name="name"' in content and "Mug" in content
    assert 'name="stockCount"' in content
    assert 'name="images"; filename="mug.png"' in content
    assert "x-client-key" in request.headers


def test_upload_images_posts_files() -> None:
    recorder = Recorder()

    with recorder.client() as client:
        client.v0.products.upload_images("prod_1", [("a.png", b"a", "image/png"), ("b.png", b"b", "image/png")])

    request = recorder.last
    assert request.url.path == "/api/v0/products/prod_1/images"
    assert request.content.decode("latin-1").count('name="images"') == 2


def test_transfers_use_camel_case_bodies() -> None:
    recorder = Recorder()

    with recorder.client() as client:
        client.v0.transfers.create_stablecoin_conversion(
            amount=50, destination_currency="eurc", source_currency="usdc", source_network="base", wallet_id="w_1"
        )

    assert _body(recorder.last) == {
        "amount": 50.0,
        "destinationCurrency": "eurc",
        "sourceCurrency": "usdc",
        "sourceNetwork": "base",
        "walletId": "w_1",
    }


def _call_every_endpoint(client: DevdraftClient) -> None:
    v0 = client.v0
    v0.health.check()
    v0.health.check_public()
    v0.customers.create(first_name="A", last_name="B", phone_number="+1")
    v0.customers.retrieve("id_1")
    v0.customers.update("id_1", email="a@example.com")
    v0.customers.list(take=1)
    v0.customers.liquidation_addresses.create("id_1", address="0x1", chain="base", currency="usdc")
    v0.customers.liquidation_addresses.retrieve("id_2", customer_id="id_1")
    v0.customers.liquidation_addresses.list("id_1")
    v0.invoices.create(
        currency="usdc",
        customer_id="cus_1",
        delivery="EMAIL",
        due_date="2024-06-01T00:00:00Z",
        email="a@example.com",
        items=[{"product_id": "p", "quantity": 1}],
        name="n",
        partial_payment=False,
        payment_link=False,
        payment_methods=["ACH"],
        status="OPEN",
    )
    v0.invoices.retrieve("id_1")
    v0.invoices.update(
        "id_1",
        currency="eurc",
        customer_id="cus_1",
        delivery="MANUALLY",
        due_date="2024-06-01T00:00:00Z",
        email="a@example.com",
        items=[],
        name="n",
        partial_payment=True,
        payment_link=False,
        payment_methods=["CRYPTO"],
        status="PAID",
    )
    v0.invoices.list()
    v0.payment_links.create(
        allow_mobile_payment=True,
        allow_quantity_adjustment=True,
        collect_address=False,
        collect_tax=False,
        currency="usdc",
        link_type="DONATION",
        title="t",
        url="https://pay.example.com",
    )
    v0.payment_links.retrieve("id_1")
    v0.payment_links.update("id_1")
    v0.payment_links.list(skip="0", take="5")
    v0.payment_intents.create_bank(
        destination_currency="usdc", destination_network="base", source_currency="usd", source_payment_rail="wire"
    )
    v0.payment_intents.create_stable(destination_network="base", source_currency="usdc", source_network="solana")
    v0.webhooks.create(encrypted=True, is_active=True, name="n", url="https://example.com")
    v0.webhooks.retrieve("id_1")
    v0.webhooks.update("id_1", is_active=False)
    v0.webhooks.list()
    v0.webhooks.delete("id_1")
    v0.transfers.create_direct_bank(
        amount=1, destination_currency="usd", payment_rail="ach", source_currency="usdc", wallet_id="w"
    )
    v0.transfers.create_direct_wallet(amount=1, network="base", stable_coin_currency="usdc", wallet_id="w")
    v0.transfers.create_external_bank_transfer(
        destination_currency="usd",
        destination_payment_rail="wire",
        external_account_id="ext",
        source_currency="usdc",
        source_wallet_id="w",
    )
    v0.transfers.create_external_stablecoin_transfer(
        beneficiary_id="b", destination_currency="usdc", source_currency="usdc", source_wallet_id="w"
    )
    v0.transfers.create_stablecoin_conversion(
        amount=1, destination_currency="eurc", source_currency="usdc", source_network="base", wallet_id="w"
    )
    v0.balance.get_all_stablecoin_balances()
    v0.balance.get_eurc()
    v0.balance.get_usdc()
    v0.exchange_rate.get_eur_to_usd()
    v0.exchange_rate.get_exchange_rate(from_="USD", to="EUR")
    v0.exchange_rate.get_usd_to_eur()
    v0.products.create(name="n", description="d", price=1)
    v0.products.retrieve("id_1")
    v0.products.update("id_1", price=2)
    v0.products.list()
    v0.products.delete("id_1")
    v0.products.upload_images("id_1", [("a.png", b"a", "image/png")])
    v0.taxes.create(name="VAT", percentage=20)
    v0.taxes.retrieve("id_1")
    v0.taxes.update("id_1", active=False)
    v0.taxes.list(active=True)
    v0.taxes.delete("id_1")
    v0.taxes.delete_all()
    v0.taxes.update_all()
    v0.test_payment.process(amount=1, currency="USD", description="d")
    v0.test_payment.retrieve("id_1")
    v0.test_payment.refund("id_1")


def test_every_covered_endpoint_is_reachable() -> None:
    recorder = Recorder()

    with recorder.client() as client:
        _call_every_endpoint(client)

    called = {
        f"{request.method} {_ID_SEGMENT.sub('/{}', request.url.path)}" for request in recorder.requests
    }
    assert called == set(SDK_ENDPOINT_COVERAGE)
    assert len(recorder.requests) == len(SDK_ENDPOINT_COVERAGE)
