"""Endpoints covered by the SDK, keyed the way OpenAPI documents name operations."""

SDK_ENDPOINT_COVERAGE: dict[str, str] = {
    "GET /api/v0/health": "health.check",
    "GET /api/v0/health/public": "health.check_public",
    "POST /api/v0/customers": "customers.create",
    "GET /api/v0/customers": "customers.list",
    "GET /api/v0/customers/{}": "customers.retrieve",
    "PATCH /api/v0/customers/{}": "customers.update",
    "POST /api/v0/customers/{}/liquidation_addresses": "customers.liquidation_addresses.create",
    "GET /api/v0/customers/{}/liquidation_addresses": "customers.liquidation_addresses.list",
    "GET /api/v0/customers/{}/liquidation_addresses/{}": "customers.liquidation_addresses.retrieve",
    "POST /api/v0/invoices": "invoices.create",
    "GET /api/v0/invoices": "invoices.list",
    "GET /api/v0/invoices/{}": "invoices.retrieve",
    "PUT /api/v0/invoices/{}": "invoices.update",
    "POST /api/v0/payment-links": "payment_links.create",
    "GET /api/v0/payment-links": "payment_links.list",
    "GET /api/v0/payment-links/{}": "payment_links.retrieve",
    "PUT /api/v0/payment-links/{}": "payment_links.update",
    "POST /api/v0/payment-intents/bank": "payment_intents.create_bank",
    "POST /api/v0/payment-intents/stablecoin": "payment_intents.create_stable",
    "POST /api/v0/webhooks": "webhooks.create",
    "GET /api/v0/webhooks": "webhooks.list",
    "GET /api/v0/webhooks/{}": "webhooks.retrieve",
    "PATCH /api/v0/webhooks/{}": "webhooks.update",
    "DELETE /api/v0/webhooks/{}": "webhooks.delete",
    "POST /api/v0/transfers/direct-bank": "transfers.create_direct_bank",
    "POST /api/v0/transfers/direct-wallet": "transfers.create_direct_wallet",
    "POST /api/v0/transfers/external-bank-transfer": "transfers.create_external_bank_transfer",
    "POST /api/v0/transfers/external-stablecoin-transfer": "transfers.create_external_stablecoin_transfer",
    "POST /api/v0/transfers/stablecoin-conversion": "transfers.create_stablecoin_conversion",
    "GET /api/v0/balance": "balance.get_all_stablecoin_balances",
    "GET /api/v0/balance/eurc": "balance.get_eurc",
    "GET /api/v0/balance/usdc": "balance.get_usdc",
    "GET /api/v0/exchange-rate": "exchange_rate.get_exchange_rate",
    "GET /api/v0/exchange-rate/eur-to-usd": "exchange_rate.get_eur_to_usd",
    "GET /api/v0/exchange-rate/usd-to-eur": "exchange_rate.get_usd_to_eur",
    "POST /api/v0/products": "products.create",
    "GET /api/v0/products": "products.list",
    "GET /api/v0/products/{}": "products.retrieve",
    "PUT /api/v0/products/{}": "products.update",
    "DELETE /api/v0/products/{}": "products.delete",
    "POST /api/v0/products/{}/images": "products.upload_images",
    "POST /api/v0/taxes": "taxes.create",
    "GET /api/v0/taxes": "taxes.list",
    "PUT /api/v0/taxes": "taxes.update_all",
    "DELETE /api/v0/taxes": "taxes.delete_all",
    "GET /api/v0/taxes/{}": "taxes.retrieve",
    "PUT /api/v0/taxes/{}": "taxes.update",
    "DELETE /api/v0/taxes/{}": "taxes.delete",
    "POST /api/v0/test-payment": "test_payment.process",
    "GET /api/v0/test-payment/{}": "test_payment.retrieve",
    "POST /api/v0/test-payment/{}/refund": "test_payment.refund",
}
