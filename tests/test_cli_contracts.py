from __future__ import annotations

import json
import sys

import devdraft_sdk.cli as cli
from devdraft_sdk.contracts import SDK_ENDPOINT_COVERAGE


def test_diff_contracts_handles_missing_and_extra() -> None:
    discovered = {"GET /api/v0/health", "GET /api/v0/status"}
    contract = {
        "GET /api/v0/health": "health.check",
        "GET /api/v0/health/public": "health.check_public",
    }
    missing, extra = cli._diff_contracts(discovered, contract)
    assert missing == ["GET /api/v0/health/public"]
    assert extra == ["GET /api/v0/status"]


def test_load_openapi_normalizes_path_parameter_names(tmp_path) -> None:
    document = {
        "paths": {
            "/api/v0/customers/{customerId}/liquidation_addresses/{id}": {
                "get": {},
                "parameters": [{"name": "id", "in": "path"}],
            },
            "/api/v0/webhooks/{id}": {"delete": {}, "patch": {}},
        }
    }
    (tmp_path / "openapi.json").write_text(json.dumps(document))

    assert cli._load_openapi(tmp_path / "openapi.json") == {
        "GET /api/v0/customers/{}/liquidation_addresses/{}",
        "DELETE /api/v0/webhooks/{}",
        "PATCH /api/v0/webhooks/{}",
    }


def test_cli_main_passes_with_matching_contract(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(
        sys,
        "argv",
        ["devdraft-check-contract", "--openapi", str(tmp_path / "openapi.json")],
    )
    monkeypatch.setattr(
        cli,
        "SDK_ENDPOINT_COVERAGE",
        {"GET /api/v0/webhooks/{}": "webhooks.retrieve"},
    )
    (tmp_path / "openapi.json").write_text(json.dumps({"paths": {"/api/v0/webhooks/{id}": {"get": {}}}}))

    assert cli._main() == 0


def test_cli_main_fails_on_mismatch(monkeypatch, tmp_path, capsys) -> None:
    monkeypatch.setattr(
        sys,
        "argv",
        ["devdraft-check-contract", "--openapi", str(tmp_path / "openapi.json")],
    )
    monkeypatch.setattr(
        cli,
        "SDK_ENDPOINT_COVERAGE",
        {"GET /api/v0/health": "health.check"},
    )
    (tmp_path / "openapi.json").write_text(json.dumps({"paths": {}}))

    assert cli._main() == 1
    output = capsys.readouterr().out
    assert "GET /api/v0/health (health.check)" in output
    assert "Contract coverage check failed" in output


def test_cli_list_prints_coverage_map(monkeypatch, capsys) -> None:
    monkeypatch.setattr(sys, "argv", ["devdraft-check-contract", "--list"])

    assert cli._main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(SDK_ENDPOINT_COVERAGE)
    assert "POST /api/v0/test-payment/{}/refund -> test_payment.refund" in lines


def test_coverage_map_uses_v0_paths_and_known_methods() -> None:
    for endpoint, method in SDK_ENDPOINT_COVERAGE.items():
        verb, path = endpoint.split(" ", 1)
        assert verb.lower() in cli.HTTP_METHODS
        assert path.startswith("/api/v0/")
        assert method.count(".") >= 1
