"""State, stack frames and value helpers shared by the JSON tokener."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Any, Optional

from .numparse import parse_int64, parse_uint64

UTF8_REPLACEMENT = b"\xef\xbf\xbd"

_DOUBLE_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class State(enum.IntEnum):
    """States of the tokener's state machine."""

    EATWS = 0
    START = 1
    FINISH = 2
    NULL = 3
    COMMENT_START = 4
    COMMENT = 5
    COMMENT_EOL = 6
    COMMENT_END = 7
    STRING = 8
    STRING_ESCAPE = 9
    ESCAPE_UNICODE = 10
    ESCAPE_UNICODE_NEED_ESCAPE = 11
    ESCAPE_UNICODE_NEED_U = 12
    BOOLEAN = 13
    NUMBER = 14
    ARRAY = 15
    ARRAY_ADD = 16
    ARRAY_SEP = 17
    OBJECT_FIELD_START = 18
    OBJECT_FIELD = 19
    OBJECT_FIELD_END = 20
    OBJECT_VALUE = 21
    OBJECT_VALUE_ADD = 22
    OBJECT_SEP = 23
    ARRAY_AFTER_SEP = 24
    OBJECT_FIELD_START_AFTER_SEP = 25
    INF = 26


@dataclass
class StackFrame:
    """One nesting level of the tokener: its state and the value being built."""

    state: State = State.EATWS
    saved_state: State = State.START
    current: Any = None
    field_name: Optional[str] = None


class Utf8Validator:
    """Checks, byte by byte, that a stream is well-formed UTF-8."""

    def __init__(self) -> None:
        self._remaining = 0

    def feed(self, byte: int) -> bool:
        """Accept the next byte; return False if it breaks the encoding."""
        byte &= 0xFF
        if self._remaining == 0:
            if byte >= 0x80:
                if byte & 0xE0 == 0xC0:
                    self._remaining = 1
                elif byte & 0xF0 == 0xE0:
                    self._remaining = 2
                elif byte & 0xF8 == 0xF0:
                    self._remaining = 3
                else:
                    return False
        else:
            if byte & 0xC0 != 0x80:
                return False
            self._remaining -= 1
        return True

    def pending(self) -> int:
        """Number of continuation bytes still expected."""
        return self._remaining


def is_high_surrogate(codepoint: int) -> bool:
    """True if ``codepoint`` is a UTF-16 high (leading) surrogate."""
    return codepoint & 0xFC00 == 0xD800


def is_low_surrogate(codepoint: int) -> bool:
    """True if ``codepoint`` is a UTF-16 low (trailing) surrogate."""
    return codepoint & 0xFC00 == 0xDC00


def decode_surrogate_pair(high: int, low: int) -> int:
    """Combine a high and a low surrogate into one code point."""
    return ((high & 0x3FF) << 10) + (low & 0x3FF) + 0x10000


def encode_codepoint(codepoint: int) -> bytes:
    """Encode a code point as UTF-8.

    Lone surrogates and values beyond U+10FFFF become the replacement
    character U+FFFD.
    """
    if codepoint < 0x80:
        return bytes([codepoint])
    if codepoint < 0x800:
        return bytes([0xC0 | (codepoint >> 6), 0x80 | (codepoint & 0x3F)])
    if is_high_surrogate(codepoint) or is_low_surrogate(codepoint):
        return UTF8_REPLACEMENT
    if codepoint < 0x10000:
        return bytes([
            0xE0 | (codepoint >> 12),
            0x80 | ((codepoint >> 6) & 0x3F),
            0x80 | (codepoint & 0x3F),
        ])
    if codepoint < 0x110000:
        return bytes([
            0xF0 | ((codepoint >> 18) & 0x07),
            0x80 | ((codepoint >> 12) & 0x3F),
            0x80 | ((codepoint >> 6) & 0x3F),
            0x80 | (codepoint & 0x3F),
        ])
    return UTF8_REPLACEMENT


def number_value(text: str | bytes | bytearray, is_double: bool, strict: bool) -> int | float:
    """Convert collected number text into an int or a float.

    Outside strict mode a double may end in stray ``e``, ``E``, ``+`` or
    ``-`` characters, which are dropped. In strict mode a non-zero integer
    may not start with ``0``. Raises ValueError if the text is not a number.
    """
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("latin-1")
    if is_double and not strict:
        while len(text) > 1 and text[-1] in "eE-+":
            text = text[:-1]
    if not text:
        raise ValueError("number expected")

    if not is_double:
        if text[0] == "-":
            return parse_int64(text)
        value = parse_uint64(text)
        if value and text[0] == "0" and strict:
            raise ValueError(f"number expected: leading zero in {text!r}")
        return value

    if _DOUBLE_RE.fullmatch(text) is None:
        raise ValueError(f"number expected: {text!r}")
    return float(text)