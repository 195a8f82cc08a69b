"""JSON encoding/decoding for request and response bodies, independent of the HTTP layer."""
import json
import math
from typing import Any


class BodyDecodeError(ValueError):
    """Raised when a request body cannot be read as a JSON document."""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant {name}")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {text}")
    return value


def decode_body(raw: bytes) -> Any:
    """
    Decodes raw UTF-8 JSON bytes into Python data.

    Empty input, NaN/Infinity literals and numbers too large for a double are errors,
    so everything decoded here can be encoded again by encode_body.
    """
    try:
        return json.loads(
            raw.decode("utf-8"),
            parse_constant=_reject_constant,
            parse_float=_finite_float,
        )
    except ValueError as e:
        raise BodyDecodeError(f"Request body is not valid JSON: {e}") from e


def decode_object(raw: bytes) -> dict:
    """
    Like decode_body, but returns the fields of the document.

    Arrays, strings and numbers have no fields and decode to an empty dict;
    a `null` document has nothing to read fields from and is an error.
    """
    body = decode_body(raw)
    if body is None:
        raise BodyDecodeError("Request body is null")
    if not isinstance(body, dict):
        return {}
    return body


def encode_body(body: Any) -> bytes:
    # Same compact form Starlette's JSONResponse produces
    return json.dumps(
        body,
        ensure_ascii=False,
        allow_nan=False,
        indent=None,
        separators=(",", ":"),
    ).encode("utf-8")
