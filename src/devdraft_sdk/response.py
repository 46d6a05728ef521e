"""Envelope returned by ``with_raw_response`` service methods."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

import httpx

from ._conversion import coerce
from .exceptions import DevdraftError

T = TypeVar("T")

_UNPARSED = object()


def decode_body(response: httpx.Response) -> Any:
    if response.status_code == 204 or not response.content:
        return None
    content_type = response.headers.get("content-type", "").lower()
    if "json" not in content_type:
        return response.text
    return response.json()


class APIResponse(Generic[T]):
    """A successful HTTP exchange plus the shape its body decodes into."""

    def __init__(self, http_response: httpx.Response, *, cast_to: Any = None, retries_taken: int = 0) -> None:
        self.http_response = http_response
        self.cast_to = cast_to
        self.retries_taken = retries_taken
        self._parsed: Any = _UNPARSED

    def __repr__(self) -> str:
        shape = getattr(self.cast_to, "__name__", None) or repr(self.cast_to)
        return f"<APIResponse [{self.status_code}] {self.http_response.request.method} {self.url} -> {shape}>"

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.http_response.headers

    @property
    def url(self) -> httpx.URL:
        return self.http_response.request.url

    @property
    def text(self) -> str:
        return self.http_response.text

    def json(self) -> Any:
        return decode_body(self.http_response)

    def parse(self) -> T:
        if self._parsed is _UNPARSED:
            try:
                decoded = self.json()
            except ValueError as exc:
                raise DevdraftError(
                    "Response body is not valid JSON",
                    status_code=self.status_code,
                    body=self.text,
                    headers=self.headers,
                    cause=exc,
                ) from exc
            self._parsed = coerce(self.cast_to, decoded)
        return self._parsed
