"""Locale-independent formatting and parsing of scalar values.

Query strings must serialize the same way on every machine, so nothing here
consults ``locale``: the decimal separator is always ``.``, there are no
thousands separators, and booleans are always ``true``/``false``.

Parsers raise ``ValueError``; callers wrap it in their own error type.
"""

import enum
import math
import re
import struct
from datetime import date, datetime
from decimal import Decimal

_INT_RE = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)
_FLOAT_RE = re.compile(
    r"\s*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*",
    re.ASCII,
)

# Non-finite spellings accepted on input, case-insensitive.
_SPECIAL_FLOATS: dict[str, float] = {
    "nan": math.nan,
    "infinity": math.inf,
    "+infinity": math.inf,
    "-infinity": -math.inf,
}


def format_value(value: object) -> str:
    """Render *value* as its canonical, locale-independent string form."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, enum.Enum):
        return format_value(value.value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return repr(value)
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def parse_int(text: str, bits: int = 64) -> int:
    """Parse a signed integer that must fit in *bits* bits."""
    if not _INT_RE.fullmatch(text):
        msg = f"invalid integer literal: {text!r}"
        raise ValueError(msg)
    result = int(text)
    limit = 1 << (bits - 1)
    if not -limit <= result < limit:
        msg = f"{text!r} is out of range for a {bits}-bit integer"
        raise ValueError(msg)
    return result


def parse_float(text: str) -> float:
    """Parse a decimal or exponent literal, or ``NaN``/``Infinity``."""
    special = _SPECIAL_FLOATS.get(text.strip().lower())
    if special is not None:
        return special
    if not _FLOAT_RE.fullmatch(text):
        msg = f"invalid number literal: {text!r}"
        raise ValueError(msg)
    return float(text)


def to_single(value: float) -> float:
    """Round *value* to IEEE 754 single precision."""
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError as exc:
        msg = f"{value!r} is out of range for a single-precision float"
        raise ValueError(msg) from exc


def parse_bool(text: str) -> bool:
    """Parse ``true`` or ``false`` (case-insensitive)."""
    lowered = text.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    msg = f"invalid boolean literal: {text!r}"
    raise ValueError(msg)
