"""Number parsing helpers with C library prefix semantics."""

from __future__ import annotations

import math
import re

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1

_C_SPACE = "[ \\t\\n\\v\\f\\r]*"
_INT_RE = re.compile(_C_SPACE + "([+-]?)([0-9]+)")

_HEX = "0[xX](?:[0-9a-fA-F]+(?:\\.[0-9a-fA-F]*)?|\\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
_DEC = "(?:[0-9]+(?:\\.[0-9]*)?|\\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
_INF = "(?i:inf(?:inity)?)"
_NAN = "(?i:nan)(?:\\([0-9A-Za-z_]*\\))?"
_DOUBLE_RE = re.compile(
    _C_SPACE
    + "(?P<sign>[+-]?)(?:(?P<hex>"
    + _HEX
    + ")|(?P<dec>"
    + _DEC
    + ")|(?P<inf>"
    + _INF
    + ")|(?P<nan>"
    + _NAN
    + "))"
)


def _text(value: str | bytes | bytearray) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    return value


def parse_int64(text: str | bytes | bytearray) -> int:
    """Parse a leading base-10 integer, clamping to the signed 64-bit range.

    Leading whitespace is skipped and trailing characters are ignored.
    Raises ValueError if no digits are found.
    """
    match = _INT_RE.match(_text(text))
    if match is None:
        raise ValueError(f"no integer found in {text!r}")
    sign, digits = match.groups()
    value = int(digits)
    if sign == "-":
        value = -value
    return max(INT64_MIN, min(INT64_MAX, value))


def parse_uint64(text: str | bytes | bytearray) -> int:
    """Parse a leading base-10 unsigned integer, clamping to 64 bits.

    Raises ValueError for a negative number or if no digits are found.
    """
    source = _text(text).lstrip(" ")
    if source.startswith("-"):
        raise ValueError(f"unsigned integer cannot be negative: {text!r}")
    match = _INT_RE.match(source)
    if match is None:
        raise ValueError(f"no integer found in {text!r}")
    sign, digits = match.groups()
    value = int(digits)
    if value > UINT64_MAX:
        return UINT64_MAX
    if sign == "-":
        value = -value % (UINT64_MAX + 1)
    return value


def parse_double(text: str | bytes | bytearray) -> float:
    """Parse a leading floating point number, ignoring trailing characters.

    Accepts decimal and hexadecimal forms as well as infinity and NaN.
    Raises ValueError if no number is found.
    """
    match = _DOUBLE_RE.match(_text(text))
    if match is None:
        raise ValueError(f"no number found in {text!r}")
    negative = match.group("sign") == "-"
    if match.group("hex") is not None:
        try:
            value = float.fromhex(match.group("hex"))
        except OverflowError:
            value = math.inf
    elif match.group("dec") is not None:
        value = float(match.group("dec"))
    elif match.group("inf") is not None:
        value = math.inf
    else:
        value = math.nan
    return -value if negative else value