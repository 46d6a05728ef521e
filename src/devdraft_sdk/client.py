"""Synchronous client for the Devdraft API."""

from __future__ import annotations

import random
import time
from dataclasses import replace
from types import MappingProxyType
from typing import Any, Mapping, Sequence
from urllib.parse import quote

import httpx
import structlog

from ._conversion import DumpState, dump, flag_streams
from .config import ClientConfig
from .exceptions import (
    DevdraftConnectionError,
    DevdraftTimeoutError,
    DevdraftValidationError,
    error_class_for_status,
)
from .request_options import DEFAULT_MAX_RETRIES, DEFAULT_TIMEOUT, RequestOptions, resolve_request_options
from .resources.v0 import V0
from .response import APIResponse, decode_body
from .security import parse_retry_after, sanitize_headers

logger = structlog.get_logger(__name__)


def _coerce_query_params(query: Mapping[str, Any] | None) -> dict[str, Any]:
    if not query:
        return {}
    normalized: dict[str, Any] = {}
    for key, value in query.items():
        if value is None:
            continue
        value = dump(value)
        if isinstance(value, list):
            normalized[key] = ["" if v is None else v for v in value]
            continue
        normalized[key] = value
    return normalized


def _error_message(parsed_body: Any, raw_body: str | None, status_code: int) -> str:
    if isinstance(parsed_body, Mapping):
        message = parsed_body.get("message")
        if isinstance(message, list):
            return "; ".join(str(item) for item in message)
        if isinstance(message, str):
            return message
        if isinstance(parsed_body.get("error"), str):
            return parsed_body["error"]
    if raw_body:
        return raw_body
    return f"request failed with status {status_code}"


class DevdraftClient:
    """Client for the Devdraft REST API.

    Configuration is read once here (arguments first, then ``DEVDRAFT_*``
    environment variables) and never changes afterwards, so one client can be
    shared between threads. Pass ``httpx_client`` to control the transport.
    """

    idempotent_methods = frozenset({"GET", "HEAD", "DELETE"})
    retryable_status_codes = frozenset({408, 429})
    retry_base_delay = 0.5
    retry_max_delay = 8.0
    retry_after_cap = 60.0
    jitter_ratio = 0.25

    def __init__(
        self,
        *,
        api_key: str | None = None,
        secret: str | None = None,
        idempotency_key: str | None = None,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        headers: Mapping[str, str] | None = None,
        follow_redirects: bool = True,
        allow_http: bool = False,
        httpx_client: httpx.Client | None = None,
    ) -> None:
        try:
            self.config = ClientConfig.from_env(
                api_key=api_key,
                secret=secret,
                idempotency_key=idempotency_key,
                base_url=base_url,
                timeout=timeout,
                max_retries=max_retries,
                headers=headers,
                allow_http=allow_http,
            )
        except ValueError as exc:
            raise DevdraftValidationError(str(exc), cause=exc) from exc
        self._default_headers = MappingProxyType(self.config.default_headers())
        self._httpx = httpx_client or httpx.Client(
            timeout=self.config.timeout,
            follow_redirects=follow_redirects,
            trust_env=False,
        )
        self.v0 = V0(self)

    def __enter__(self) -> "DevdraftClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._httpx.close()

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def default_headers(self) -> Mapping[str, str]:
        return self._default_headers

    def _url(self, template: str, path_params: Sequence[Any]) -> str:
        if "://" in template:
            raise DevdraftValidationError("Full URLs are not allowed as a request path")
        if "\x00" in template:
            raise DevdraftValidationError("Invalid path characters")
        encoded = []
        for param in path_params:
            text = "" if param is None else str(param)
            if not text or text in {".", ".."}:
                raise DevdraftValidationError(f"Expected a non-empty path parameter, got {param!r}")
            encoded.append(quote(text, safe=""))
        try:
            path = template.format(*encoded)
        except IndexError as exc:
            raise DevdraftValidationError(f"Missing path parameter for '{template}'", cause=exc) from exc
        return f"{self.config.base_url}/{path.lstrip('/')}"

    def _headers(self, request_options: RequestOptions, *, multipart: bool = False) -> httpx.Headers:
        merged = httpx.Headers(dict(self._default_headers))
        if request_options.idempotency_key:
            merged["idempotency-key"] = request_options.idempotency_key
        if request_options.headers:
            merged.update({str(k): str(v) for k, v in request_options.headers.items()})
        if multipart and merged.get("content-type", "").startswith("application/json"):
            del merged["content-type"]
        return merged

    def _merge_query(self, request_options: RequestOptions, query: Mapping[str, Any] | None) -> dict[str, Any] | None:
        merged: dict[str, Any] = {}
        for source in (request_options.query, query):
            merged.update(_coerce_query_params(source))
        return merged or None

    def _is_retry_safe(self, method: str, state: DumpState, headers: httpx.Headers) -> bool:
        # POST/PUT/PATCH are replayable only under an idempotency key.
        if method not in self.idempotent_methods and "idempotency-key" not in headers:
            state.can_retry = False
        return state.can_retry

    def _should_retry(self, status_code: int, attempt: int, max_retries: int, retry_safe: bool) -> bool:
        if attempt > max_retries or not retry_safe:
            return False
        return status_code in self.retryable_status_codes or status_code >= 500

    def _retry_delay(self, attempt: int, status_code: int | None = None, retry_after: float | None = None) -> float:
        if status_code in {429, 503} and retry_after is not None:
            return min(max(0.0, retry_after), self.retry_after_cap)
        base = min(self.retry_max_delay, self.retry_base_delay * (2 ** max(0, attempt - 1)))
        jitter = random.uniform(0, base * self.jitter_ratio)
        return base + jitter

    def _raise_for_status(self, response: httpx.Response) -> None:
        if response.is_success:
            return
        raw_body: str | None = None
        parsed_body: Any = None
        try:
            raw_body = response.text
            parsed_body = decode_body(response)
        except ValueError:
            parsed_body = None

        error_code = parsed_body.get("error_code") if isinstance(parsed_body, Mapping) else None
        error_cls = error_class_for_status(response.status_code)
        raise error_cls(
            _error_message(parsed_body, raw_body, response.status_code),
            status_code=response.status_code,
            error_code=error_code if isinstance(error_code, str) else None,
            body=parsed_body if parsed_body is not None else raw_body,
            headers=MappingProxyType(dict(response.headers)),
            request_id=response.headers.get("x-request-id"),
            retry_after=parse_retry_after(response.headers.get("Retry-After")),
        )

    def request(
        self,
        method: str,
        path: str,
        *path_params: Any,
        query: Mapping[str, Any] | None = None,
        body: Any | None = None,
        files: Any | None = None,
        options: RequestOptions | Mapping[str, Any] | None = None,
        cast_to: Any = None,
        raw: bool = False,
    ) -> Any:
        """Send one API request and decode the result into ``cast_to``.

        ``path`` is a template with positional ``{0}``, ``{1}`` placeholders
        filled from ``path_params`` (percent-encoded). With ``raw=True`` the
        ``APIResponse`` envelope is returned instead of the parsed value.
        """
        method = method.upper()
        url = self._url(path, path_params)
        state = DumpState()
        final_body = dump(body, state) if body is not None else None
        if files is not None:
            flag_streams(files, state)

        request_options = resolve_request_options(
            options,
            timeout=self.config.timeout,
            max_retries=self.config.max_retries,
        )
        headers = self._headers(request_options, multipart=files is not None)
        retry_safe = self._is_retry_safe(method, state, headers)
        if not retry_safe:
            request_options = replace(request_options, max_retries=0)
        final_query = self._merge_query(request_options, query)
        retries = request_options.max_retries or 0

        attempt = 0
        while True:
            attempt += 1
            logger.debug(
                "devdraft.request",
                method=method,
                url=url,
                attempt=attempt,
                headers=sanitize_headers(headers),
            )
            try:
                response = self._httpx.request(
                    method,
                    url,
                    headers=headers,
                    params=final_query,
                    json=final_body,
                    files=files,
                    timeout=request_options.timeout,
                )
            except httpx.TimeoutException as exc:
                if attempt > retries or not retry_safe:
                    raise DevdraftTimeoutError("Request timed out", cause=exc) from exc
                self._sleep_before_retry(method, url, attempt, error=type(exc).__name__)
                continue
            except httpx.TransportError as exc:
                if attempt > retries or not retry_safe:
                    raise DevdraftConnectionError("Connection error", cause=exc) from exc
                self._sleep_before_retry(method, url, attempt, error=type(exc).__name__)
                continue

            logger.debug("devdraft.response", method=method, url=url, status=response.status_code)
            if response.is_success:
                break
            if self._should_retry(response.status_code, attempt, retries, retry_safe):
                self._sleep_before_retry(
                    method,
                    url,
                    attempt,
                    status_code=response.status_code,
                    retry_after=parse_retry_after(response.headers.get("Retry-After")),
                )
                continue
            break

        self._raise_for_status(response)
        api_response: APIResponse[Any] = APIResponse(response, cast_to=cast_to, retries_taken=attempt - 1)
        if raw:
            return api_response
        return api_response.parse()

    def _sleep_before_retry(
        self,
        method: str,
        url: str,
        attempt: int,
        *,
        status_code: int | None = None,
        retry_after: float | None = None,
        error: str | None = None,
    ) -> None:
        wait = self._retry_delay(attempt, status_code, retry_after)
        logger.warning(
            "devdraft.retry",
            method=method,
            url=url,
            attempt=attempt,
            status=status_code,
            error=error,
            delay=round(wait, 3),
        )
        time.sleep(wait)
