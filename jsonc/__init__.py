"""JSON building blocks: byte buffer, ordered hash table, hashes, number parsing, tokener helpers and JSON Pointer."""

__version__ = "0.1.0"

__all__ = [
    "hashing",
    "linkhash",
    "numparse",
    "pointer",
    "printbuf",
    "tokstate",
]