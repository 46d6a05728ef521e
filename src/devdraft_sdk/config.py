"""Client-wide configuration, loaded once at client construction."""

from __future__ import annotations

import os
import platform
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .request_options import DEFAULT_MAX_RETRIES, DEFAULT_TIMEOUT
from .security import validate_base_url

__version__ = "0.1.0"

DEFAULT_BASE_URL = "https://api.devdraft.ai"

API_KEY_ENV_VAR = "DEVDRAFT_API_KEY"
SECRET_ENV_VAR = "DEVDRAFT_SECRET"
IDEMPOTENCY_KEY_ENV_VAR = "DEVDRAFT_IDEMPOTENCY_KEY"
BASE_URL_ENV_VAR = "DEVDRAFT_BASE_URL"


def _os_name() -> str:
    name = platform.system().lower()
    return {"darwin": "MacOS", "windows": "Windows", "linux": "Linux", "freebsd": "FreeBSD"}.get(
        name, f"Other:{name}" if name else "Unknown"
    )


def _arch() -> str:
    machine = platform.machine().lower()
    if machine in {"x86_64", "amd64"}:
        return "x64"
    if machine in {"arm64", "aarch64"}:
        return "arm64"
    if machine in {"i386", "i686", "x86"}:
        return "x32"
    return f"other:{machine}" if machine else "unknown"


def platform_headers() -> dict[str, str]:
    """Diagnostic headers describing the SDK and runtime. No functional effect."""
    return {
        "X-Devdraft-Lang": "python",
        "X-Devdraft-Package-Version": __version__,
        "X-Devdraft-OS": _os_name(),
        "X-Devdraft-Arch": _arch(),
        "X-Devdraft-Runtime": platform.python_implementation(),
        "X-Devdraft-Runtime-Version": platform.python_version(),
    }


@dataclass(frozen=True)
class ClientConfig:
    api_key: str | None = None
    secret: str | None = None
    idempotency_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_env(
        cls,
        *,
        api_key: str | None = None,
        secret: str | None = None,
        idempotency_key: str | None = None,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        headers: Mapping[str, str] | None = None,
        allow_http: bool = False,
        environ: Mapping[str, str] | None = None,
    ) -> "ClientConfig":
        env = os.environ if environ is None else environ
        resolved_base_url = (base_url or env.get(BASE_URL_ENV_VAR) or DEFAULT_BASE_URL).rstrip("/")
        validate_base_url(resolved_base_url, allow_http=allow_http)
        return cls(
            api_key=api_key or env.get(API_KEY_ENV_VAR) or None,
            secret=secret or env.get(SECRET_ENV_VAR) or None,
            idempotency_key=idempotency_key or env.get(IDEMPOTENCY_KEY_ENV_VAR) or None,
            base_url=resolved_base_url,
            timeout=timeout,
            max_retries=max_retries,
            headers=MappingProxyType({str(k): str(v) for k, v in (headers or {}).items()}),
        )

    @property
    def user_agent(self) -> str:
        return f"devdraft/Python {__version__}"

    def default_headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": self.user_agent,
            **platform_headers(),
        }
        if self.api_key:
            headers["x-client-key"] = self.api_key
        if self.secret:
            headers["x-client-secret"] = self.secret
        if self.idempotency_key:
            headers["idempotency-key"] = self.idempotency_key
        headers.update(self.headers)
        return headers
