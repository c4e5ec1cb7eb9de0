"""JSON encoding of request payloads and decoding of API responses."""

import json
from typing import Any, TypeVar, get_origin

from pydantic import BaseModel, TypeAdapter, ValidationError

from runscope.radar.errors import DecodeError, EncodeError

T = TypeVar("T")


def encode(payload: BaseModel) -> bytes:
    """Serialize only the fields explicitly set on ``payload`` to a value."""
    try:
        content = payload.model_dump_json(exclude_unset=True, exclude_none=True)
        return content.encode("utf-8")
    except (TypeError, ValueError) as e:
        raise EncodeError(f"Failed to encode {type(payload).__name__}: {e}") from e


def decode(content: bytes, target: type[T]) -> T:
    """Decode a response body into ``target``.

    The service wraps payloads as ``{"data": ..., "meta": ...}``; the
    ``data`` member is unwrapped when present. A null payload decodes to
    the target's empty value.
    """
    try:
        body: Any = json.loads(content) if content else None
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"Response is not valid JSON: {e}") from e

    if isinstance(body, dict) and "data" in body:
        body = body["data"]

    if body is None:
        body = [] if _is_list_type(target) else {}

    try:
        return TypeAdapter(target).validate_python(body)
    except ValidationError as e:
        raise DecodeError(f"Unexpected response schema: {e}") from e


def _is_list_type(target: Any) -> bool:
    return get_origin(target) is list
