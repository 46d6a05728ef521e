"""Conversion between typed records and wire JSON.

``dump`` turns records (or loose mappings already validated into records) into
plain JSON-ready mappings for request bodies and query strings. ``coerce``
turns decoded response JSON into typed records.

The per-field descriptor table is the pydantic ``model_fields`` mapping of each
record: declaration order, ``alias`` as the wire name, ``is_required()`` and
the annotation as the value kind.
"""

from __future__ import annotations

import collections.abc
import types
from dataclasses import dataclass, replace
from datetime import date, datetime
from enum import Enum
from functools import lru_cache
from typing import Any, Mapping, TypeVar, Union, get_args, get_origin

import structlog
from pydantic import BaseModel, TypeAdapter, ValidationError

from .exceptions import DevdraftValidationError
from .request_options import RequestOptions

logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass
class DumpState:
    """Mutable state threaded through one ``dump`` call."""

    can_retry: bool = True


def _is_unreplayable(value: Any) -> bool:
    if isinstance(value, (str, bytes, bytearray, memoryview)):
        return False
    if not callable(getattr(value, "read", None)):
        return False
    seekable = getattr(value, "seekable", None)
    return not (callable(seekable) and seekable())


def _format_validation_error(model: type[BaseModel], exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or model.__name__
        if error.get("type") == "missing":
            problems.append(f"missing required field '{location}'")
        else:
            problems.append(f"invalid value for '{location}': {error.get('msg')}")
    return f"{model.__name__}: " + "; ".join(problems)


def validate_params(model: type[ModelT], value: ModelT | Mapping[str, Any] | None) -> ModelT:
    """Validate a record or loose mapping into a ``model`` instance.

    ``None`` entries of a mapping are treated as absent. Instances are
    re-validated, so a value assigned after construction is checked too.
    """
    if value is None:
        value = {}
    if isinstance(value, Mapping):
        value = {key: item for key, item in value.items() if item is not None}
    elif not isinstance(value, model):
        raise DevdraftValidationError(
            f"{model.__name__}: expected a mapping or {model.__name__}, got {type(value).__name__}"
        )
    try:
        return model.model_validate(value)
    except ValidationError as exc:
        raise DevdraftValidationError(
            _format_validation_error(model, exc),
            body=exc.errors(include_url=False, include_context=False),
            cause=exc,
        ) from exc


def dump(value: Any, state: DumpState | None = None) -> Any:
    """Convert ``value`` to its wire representation.

    Records are emitted field by field in declaration order under their wire
    names; unset or ``None`` optional fields are left out entirely.
    """
    state = state if state is not None else DumpState()

    if isinstance(value, BaseModel):
        model = type(value)
        out: dict[str, Any] = {}
        for name, field in model.model_fields.items():
            key = field.alias or name
            if name not in value.model_fields_set or name not in value.__dict__:
                if field.is_required():
                    raise DevdraftValidationError(f"{model.__name__}: missing required field '{key}'")
                continue
            item = value.__dict__[name]
            if item is None and not field.is_required():
                continue
            out[key] = dump(item, state)
        return out
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {str(key): dump(item, state) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [dump(item, state) for item in value]
    if _is_unreplayable(value):
        state.can_retry = False
    return value


def flag_streams(value: Any, state: DumpState) -> None:
    """Mark ``state`` retry-unsafe if ``value`` holds a stream that cannot be rewound.

    Upload payloads keep their tuple structure for the transport, so they are
    scanned here instead of going through ``dump``.
    """
    if isinstance(value, Mapping):
        items: Any = value.values()
    elif isinstance(value, (list, tuple)):
        items = value
    else:
        if _is_unreplayable(value):
            state.can_retry = False
        return
    for item in items:
        flag_streams(item, state)


def parse_request(
    model: type[BaseModel],
    params: BaseModel | Mapping[str, Any] | None,
    options: RequestOptions | Mapping[str, Any] | None,
) -> tuple[dict[str, Any], RequestOptions]:
    """Validate and dump ``params``; force ``max_retries=0`` for retry-unsafe payloads."""
    record = validate_params(model, params)
    state = DumpState()
    dumped = dump(record, state)
    request_options = RequestOptions.parse(options)
    if not state.can_retry:
        request_options = replace(request_options, max_retries=0)
    return dumped, request_options


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(shape)


def _shape_name(shape: Any) -> str:
    return getattr(shape, "__name__", None) or repr(shape)


def coerce(shape: Any, value: Any) -> Any:
    """Convert decoded JSON into ``shape``; ``None`` leaves the value untouched.

    Payloads that do not validate are constructed leniently so that a missing
    field only fails when it is read.
    """
    if shape is None or value is None:
        return value
    try:
        return _adapter(shape).validate_python(value)
    except ValidationError as exc:
        logger.debug("devdraft.lenient_decode", shape=_shape_name(shape), errors=exc.error_count())
        return construct(shape, value)


def _is_model(tp: Any) -> bool:
    return isinstance(tp, type) and issubclass(tp, BaseModel)


def construct(shape: Any, value: Any) -> Any:
    """Build ``shape`` from ``value`` without validation."""
    if value is None:
        return None

    origin = get_origin(shape)
    if origin in (Union, types.UnionType):
        members = [arg for arg in get_args(shape) if arg is not type(None)]
        for member in members:
            if _is_model(member) and isinstance(value, Mapping):
                return construct(member, value)
            if get_origin(member) in (list, collections.abc.Sequence) and isinstance(value, list):
                return construct(member, value)
        return value
    if origin in (list, collections.abc.Sequence):
        (item_shape,) = get_args(shape) or (Any,)
        if isinstance(value, list):
            return [construct(item_shape, item) for item in value]
        return value
    if origin is dict:
        args = get_args(shape)
        item_shape = args[1] if len(args) == 2 else Any
        if isinstance(value, Mapping):
            return {key: construct(item_shape, item) for key, item in value.items()}
        return value
    if _is_model(shape) and isinstance(value, Mapping):
        fields: dict[str, Any] = {}
        for name, field in shape.model_fields.items():
            key = field.alias or name
            if key in value:
                fields[key] = construct(field.annotation, value[key])
            elif name in value:
                fields[key] = construct(field.annotation, value[name])
        return shape.model_construct(**fields)
    if isinstance(shape, type) and issubclass(shape, Enum):
        try:
            return shape(value)
        except ValueError:
            return value
    return value
