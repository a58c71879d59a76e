"""String and identity hash functions used by the link hash table."""

from __future__ import annotations

import enum
import os
import threading
from typing import Callable

LH_PRIME = 0x9E370001

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


class StringHash(enum.IntEnum):
    """Selectable hash functions for string keys."""

    DEFAULT = 0
    PERLLIKE = 1


def _as_bytes(key: str | bytes | bytearray) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    return bytes(key)


def _c_string(key: str | bytes | bytearray) -> bytes:
    """Return the key's bytes up to (not including) the first NUL byte."""
    data = _as_bytes(key)
    end = data.find(b"\0")
    return data if end < 0 else data[:end]


def _rot(x: int, k: int) -> int:
    return ((x << k) | (x >> (32 - k))) & _MASK32


def _mix(a: int, b: int, c: int) -> tuple[int, int, int]:
    a = (a - c) & _MASK32
    a ^= _rot(c, 4)
    c = (c + b) & _MASK32
    b = (b - a) & _MASK32
    b ^= _rot(a, 6)
    a = (a + c) & _MASK32
    c = (c - b) & _MASK32
    c ^= _rot(b, 8)
    b = (b + a) & _MASK32
    a = (a - c) & _MASK32
    a ^= _rot(c, 16)
    c = (c + b) & _MASK32
    b = (b - a) & _MASK32
    b ^= _rot(a, 19)
    a = (a + c) & _MASK32
    c = (c - b) & _MASK32
    c ^= _rot(b, 4)
    b = (b + a) & _MASK32
    return a, b, c


def _final(a: int, b: int, c: int) -> int:
    c ^= b
    c = (c - _rot(b, 14)) & _MASK32
    a ^= c
    a = (a - _rot(c, 11)) & _MASK32
    b ^= a
    b = (b - _rot(a, 25)) & _MASK32
    c ^= b
    c = (c - _rot(b, 16)) & _MASK32
    a ^= c
    a = (a - _rot(c, 4)) & _MASK32
    b ^= a
    b = (b - _rot(a, 14)) & _MASK32
    c ^= b
    c = (c - _rot(b, 24)) & _MASK32
    return c


def _word(chunk: bytes) -> int:
    return int.from_bytes(chunk, "little")


def hashlittle(key: str | bytes | bytearray, initval: int) -> int:
    """Hash a byte string into a 32-bit value (lookup3 ``hashlittle``)."""
    data = _as_bytes(key)
    length = len(data)
    a = b = c = (0xDEADBEEF + length + initval) & _MASK32
    if length == 0:
        return c

    offset = 0
    while length - offset > 12:
        a = (a + _word(data[offset : offset + 4])) & _MASK32
        b = (b + _word(data[offset + 4 : offset + 8])) & _MASK32
        c = (c + _word(data[offset + 8 : offset + 12])) & _MASK32
        a, b, c = _mix(a, b, c)
        offset += 12

    tail = data[offset:].ljust(12, b"\0")
    a = (a + _word(tail[0:4])) & _MASK32
    b = (b + _word(tail[4:8])) & _MASK32
    c = (c + _word(tail[8:12])) & _MASK32
    return _final(a, b, c)


def perllike_str_hash(key: str | bytes | bytearray) -> int:
    """A simple multiplicative string hash, similar to the one Perl uses."""
    hashval = 1
    for byte in _c_string(key):
        signed = byte - 256 if byte >= 0x80 else byte
        hashval = (hashval * 33 + signed) & _MASK32
    return hashval


_seed_lock = threading.Lock()
_random_seed: int | None = None


def _get_random_seed() -> int:
    global _random_seed
    if _random_seed is None:
        with _seed_lock:
            if _random_seed is None:
                seed = -1
                while seed == -1:
                    seed = int.from_bytes(os.urandom(4), "little", signed=True)
                _random_seed = seed
    return _random_seed


def char_hash(key: str | bytes | bytearray) -> int:
    """Default string hash: ``hashlittle`` with a per-process random seed."""
    return hashlittle(_c_string(key), _get_random_seed() & _MASK32)


def ptr_hash(key: object) -> int:
    """Hash an object by identity."""
    return ((id(key) * LH_PRIME) & _MASK64) >> 4


_string_hash_fn: Callable[[str | bytes | bytearray], int] = char_hash


def set_string_hash(kind: int) -> None:
    """Select the hash function used for string-keyed tables."""
    global _string_hash_fn
    if kind == StringHash.DEFAULT:
        _string_hash_fn = char_hash
    elif kind == StringHash.PERLLIKE:
        _string_hash_fn = perllike_str_hash
    else:
        raise ValueError(f"unknown string hash kind: {kind!r}")


def current_string_hash() -> Callable[[str | bytes | bytearray], int]:
    """Return the hash function currently selected for string keys."""
    return _string_hash_fn