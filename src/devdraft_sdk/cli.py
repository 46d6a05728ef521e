"""CLI utilities for developer workflows."""

from __future__ import annotations

import argparse
import json
import re
from pathlib import Path

from devdraft_sdk.contracts import SDK_ENDPOINT_COVERAGE


HTTP_METHODS = {"get", "post", "put", "patch", "delete", "head", "options", "trace"}

_PATH_PARAM = re.compile(r"\{[^/}]*\}")


def _normalize_path(path: str) -> str:
    # Parameter names differ between documents; only their positions matter.
    return _PATH_PARAM.sub("{}", path)


def _load_openapi(path: Path) -> set[str]:
    payload = json.loads(path.read_text())
    paths = payload.get("paths", {})
    discovered: set[str] = set()
    for path, operations in paths.items():
        for method in operations:
            if not isinstance(method, str) or method.lower() not in HTTP_METHODS:
                continue
            discovered.add(f"{method.upper()} {_normalize_path(path)}")
    return discovered


def _diff_contracts(discovered: set[str], contract: dict[str, str]) -> tuple[list[str], list[str]]:
    expected = set(contract)
    missing = sorted(expected - discovered)
    extra = sorted(discovered - expected)
    return missing, extra


def _main() -> int:
    parser = argparse.ArgumentParser(
        prog="devdraft-check-contract",
        description="Compare an OpenAPI document with the endpoints the SDK covers.",
    )
    parser.add_argument(
        "--openapi",
        default=Path.cwd() / "openapi.json",
        type=Path,
    )
    parser.add_argument("--list", action="store_true", help="print the coverage map and exit")
    args = parser.parse_args()

    if args.list:
        for endpoint, method in sorted(SDK_ENDPOINT_COVERAGE.items()):
            print(f"{endpoint} -> {method}")
        return 0

    discovered = _load_openapi(args.openapi)
    missing, extra = _diff_contracts(discovered, SDK_ENDPOINT_COVERAGE)

    if missing:
        print("Missing endpoints in OpenAPI for covered SDK methods:")
        for endpoint in missing:
            method = SDK_ENDPOINT_COVERAGE[endpoint]
            print(f"  - {endpoint} ({method})")

    if extra:
        print("OpenAPI endpoints not represented in SDK coverage map:")
        for endpoint in extra:
            print(f"  - {endpoint}")

    if missing or extra:
        print("Contract coverage check failed")
        return 1

    print("Contract coverage check passed")
    return 0


def main() -> None:
    raise SystemExit(_main())
