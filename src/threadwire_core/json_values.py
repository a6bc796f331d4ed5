"""Helpers for plain JSON values.

The wire formats only carry plain JSON. The codecs use these helpers to check
values, to produce the compact text that tool-call arguments are compared
against, and to parse argument text that may be truncated.
"""

import json
import logging
import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, TypeAlias

from pydantic import JsonValue
from pydantic_core import from_json

logger = logging.getLogger(__name__)

JSONValue: TypeAlias = JsonValue
JSONObject: TypeAlias = dict[str, JsonValue]

MAX_JSON_DEPTH = 100


def is_json_value(value: Any, depth: int = 0) -> bool:
    """Check whether a value is plain JSON.

    Plain JSON is None, str, bool, a finite int/float, or a list/tuple/dict
    built from those, with str keys and at most ``MAX_JSON_DEPTH`` levels of
    nesting.
    """
    if depth > MAX_JSON_DEPTH:
        return False
    if value is None or isinstance(value, (str, bool)):
        return True
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    if isinstance(value, (list, tuple)):
        return all(is_json_value(item, depth + 1) for item in value)
    if isinstance(value, Mapping):
        return all(
            isinstance(key, str) and is_json_value(item, depth + 1)
            for key, item in value.items()
        )
    return False


def _format_number(value: float) -> str:
    """Shortest round-trip digits, in exponent notation outside [1e-6, 1e21)."""
    if not math.isfinite(value):
        return "null"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(digit) for digit in digit_tuple)
    while len(digits) > 1 and digits.endswith("0"):
        digits = digits[:-1]
        exponent += 1

    k = len(digits)
    # Position of the decimal point relative to the first digit
    n = exponent + k
    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if n - 1 >= 0 else '-'}{abs(n - 1)}"
    return sign + text


def stringify_json(value: Any) -> str:
    """Serialize a value to compact JSON text.

    No whitespace, keys in insertion order, non-ASCII characters unescaped.
    Floats use shortest round-trip digits, plain decimal notation from 1e-6
    up to 1e21 and exponent notation (``1e-7``, ``1e+21``) outside that range.
    Non-finite numbers serialize as null. This is the canonical text that
    structured tool-call arguments are compared against.

    Args:
        value: The value to serialize.

    Returns:
        Compact JSON text.

    Raises:
        TypeError: If the value contains something that is not JSON.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_number(value)
    if isinstance(value, Mapping):
        members = (
            f"{json.dumps(str(key), ensure_ascii=False)}:{stringify_json(item)}"
            for key, item in value.items()
        )
        return "{" + ",".join(members) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(stringify_json(item) for item in value) + "]"
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def parse_partial_json(text: str) -> Any | None:
    """Parse JSON text that may have been cut off mid-stream.

    Args:
        text: Complete or truncated JSON text.

    Returns:
        The parsed value, or None if the text is not (a prefix of) JSON.
    """
    try:
        return from_json(text, allow_partial=True)
    except ValueError:
        logger.debug("parse_partial_json unparsable text=%r", text[:80])
        return None


def is_present(value: Any) -> bool:
    """Check whether an optional value should be written out.

    None, False, numeric zero, NaN and the empty string count as absent.
    Empty lists and dicts are kept.
    """
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)):
        return value == value and value != 0
    if isinstance(value, str):
        return value != ""
    return True
