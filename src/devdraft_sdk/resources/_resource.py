"""Plumbing shared by every service class."""

from __future__ import annotations

import json
from dataclasses import replace
from functools import cached_property
from typing import TYPE_CHECKING, Any, Iterable, Mapping, TypeVar, Union

from pydantic import BaseModel

from ..request_options import RequestOptions

if TYPE_CHECKING:
    from ..client import DevdraftClient

Params = Union[BaseModel, Mapping[str, Any], None]
Options = Union[RequestOptions, Mapping[str, Any], None]

ResourceT = TypeVar("ResourceT", bound="APIResource")


def merge_params(params: Params, fields: Mapping[str, Any]) -> Params:
    """Overlay keyword ``fields`` on a record or mapping of parameters."""
    if not fields:
        return params
    if params is None:
        return dict(fields)
    if isinstance(params, BaseModel):
        params = {name: params.__dict__[name] for name in params.model_fields_set if name in params.__dict__}
    return {**params, **fields}


def with_idempotency_key(options: Options, idempotency_key: str | None) -> RequestOptions:
    request_options = RequestOptions.parse(options)
    if idempotency_key:
        request_options = replace(request_options, idempotency_key=idempotency_key)
    return request_options


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


def multipart_parts(fields: Mapping[str, Any], files: Iterable[Any] = (), *, file_field: str = "images") -> list[tuple[str, Any]]:
    """Encode dumped form ``fields`` and upload ``files`` as multipart parts.

    Plain fields are sent as ``(None, value)`` parts so the body stays
    multipart even when no file is attached.
    """
    parts: list[tuple[str, Any]] = []
    for key, value in fields.items():
        for item in value if isinstance(value, list) else [value]:
            parts.append((key, (None, _form_value(item))))
    for upload in files:
        parts.append((file_field, upload))
    return parts


class APIResource:
    def __init__(self, client: "DevdraftClient", *, raw: bool = False) -> None:
        self._client = client
        self._raw = raw

    @cached_property
    def with_raw_response(self: ResourceT) -> ResourceT:
        """The same service, returning ``APIResponse`` envelopes instead of parsed values."""
        return type(self)(self._client, raw=True)

    def _request(self, method: str, path: str, *path_params: Any, **kwargs: Any) -> Any:
        return self._client.request(method, path, *path_params, raw=self._raw, **kwargs)
