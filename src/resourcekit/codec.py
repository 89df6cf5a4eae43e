"""JSON request/response helpers.

`encode_response` either writes a complete JSON response or writes nothing at
all; `decode_request` hands decode errors back exactly as pydantic raised them.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter
from pydantic_core import to_jsonable_python

from .config import get_settings
from .errors import SerializationError
from .http.messages import HttpRequest, ResponseWriter, read_body


logger = logging.getLogger(__name__)

T = TypeVar("T")

JSON_CONTENT_TYPE = "application/json"


def dumps(value: Any, *, indent: int | None = None, ensure_ascii: bool | None = None) -> bytes:
    """
    Encode `value` as UTF-8 JSON.

    Anything the json module cannot encode natively goes through pydantic's
    `to_jsonable_python` (models, dataclasses, datetimes, UUIDs, sets...).

    Raises SerializationError for cycles, unsupported types and non-finite
    floats (NaN and infinities have no JSON form).
    """
    settings = get_settings()
    if indent is None:
        indent = settings.json_indent
    if ensure_ascii is None:
        ensure_ascii = settings.json_ensure_ascii
    separators = (",", ": ") if indent is not None else (",", ":")

    try:
        text = json.dumps(
            value,
            default=to_jsonable_python,
            indent=indent,
            ensure_ascii=ensure_ascii,
            separators=separators,
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError(f"cannot encode {type(value).__name__} as JSON: {e}") from e
    return text.encode("utf-8")


def encode_response(writer: ResponseWriter, status: int, value: Any) -> None:
    """Write `value` as a JSON response with `status`.

    The value is fully encoded before the writer is touched, so on
    SerializationError no header, status or body has been written.
    """
    body = dumps(value)

    writer.headers["Content-Type"] = JSON_CONTENT_TYPE
    writer.write_header(status)
    writer.write(body)


@lru_cache(maxsize=256)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


async def decode_request(request: HttpRequest, target: type[T]) -> T:
    """Read the request body and validate it as JSON into `target`.

    Validation is strict: a JSON string never coerces into an int, bool or
    similar field. The body must hold exactly one JSON value; trailing data
    after it is rejected rather than ignored.

    pydantic.ValidationError (malformed JSON, type mismatch) and any error
    raised while reading the body stream propagate unmodified.
    """
    raw = await read_body(request)
    return _adapter(target).validate_json(raw, strict=True)
