"""
JSON encoding of request bodies and decoding of response payloads.

The encoded body is both the bytes sent on the wire and the input to the
request body hash, so the encoding must be stable: compact separators,
insertion key order, UTF-8 without ASCII escaping.
"""

import dataclasses
import functools
import inspect
import json
from typing import Any, Callable, Optional, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter

T = TypeVar("T")

Decoder = Union[Type[T], Callable[[Any], T]]


def _default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_json(value: Any) -> str:
    """Serialize ``value`` (JSON types, dataclasses or pydantic models) to canonical JSON."""
    return json.dumps(value, separators=(',', ':'), ensure_ascii=False, default=_default)


def _is_function(response_type: Any) -> bool:
    return inspect.isroutine(response_type) or isinstance(response_type, functools.partial)


def decode_json(text: str, response_type: Optional[Decoder] = None) -> Any:
    """
    Parse ``text`` as JSON and convert it to ``response_type``.

    Types (dataclasses, pydantic models, ``List[...]`` and other annotations)
    are validated by pydantic, nested records included. A plain function
    receives the parsed JSON value. Without a ``response_type`` the parsed
    value is returned as is.

    Raises:
        pydantic.ValidationError: If ``text`` is not valid JSON or does not
            fit ``response_type``
        Exception: Whatever a decoding function raises
    """
    if response_type is None:
        return TypeAdapter(Any).validate_json(text)
    if _is_function(response_type):
        return response_type(TypeAdapter(Any).validate_json(text))
    return TypeAdapter(response_type).validate_json(text)
