"""Fast JSON decoding and deterministic encoding for registry documents."""

from typing import Any
import json

import msgspec
import orjson


class JSONParseError(Exception):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


_decoder = msgspec.json.Decoder()


def parse_json(content: bytes | str) -> Any:
    """
    Decode a registry response body.

    Args:
        content: Raw response body

    Returns:
        Decoded JSON value (object, array or scalar)

    Raises:
        JSONParseError: If the body is not valid JSON
    """
    raw = content.encode("utf-8") if isinstance(content, str) else content

    # Try msgspec first (fastest)
    try:
        return _decoder.decode(raw)
    except msgspec.DecodeError:
        pass

    # Standard library handles the odd document msgspec rejects (e.g. NaN literals)
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise JSONParseError(f"Invalid JSON: {e}", e) from e


def safe_json_dumps(obj: Any, **kwargs: Any) -> str:
    """
    Encode object to JSON string with sorted keys.

    Args:
        obj: Object to encode
        **kwargs: Additional arguments (indent)

    Returns:
        JSON string
    """
    indent = kwargs.get("indent", 0)

    if indent == 0:
        try:
            return orjson.dumps(obj, option=orjson.OPT_SORT_KEYS).decode("utf-8")
        except (TypeError, ValueError):
            # Fallback for edge cases (e.g., integers outside 64-bit range)
            pass

        try:
            encoder = msgspec.json.Encoder(order="sorted")
            return encoder.encode(obj).decode("utf-8")
        except (TypeError, ValueError):
            pass

    # Use stdlib for pretty-printed output or as fallback (most compatible)
    return json.dumps(obj, indent=indent if indent > 0 else None, sort_keys=True)
