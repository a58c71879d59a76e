"""A growable byte buffer used while building and parsing JSON text."""

from __future__ import annotations

_INT_MAX = 2**31 - 1


class PrintBuf:
    """Accumulates bytes; text is stored UTF-8 encoded."""

    def __init__(self) -> None:
        self._data = bytearray()

    @staticmethod
    def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
        if isinstance(data, str):
            return data.encode("utf-8")
        return bytes(data)

    def append(self, data: bytes | bytearray | memoryview | str) -> int:
        """Append data to the end of the buffer and return its length in bytes."""
        chunk = self._as_bytes(data)
        if len(chunk) > _INT_MAX - len(self._data) - 1:
            raise OverflowError("buffer size overflow")
        self._data += chunk
        return len(chunk)

    def memset(self, offset: int, charvalue: int, length: int) -> None:
        """Set ``length`` bytes to ``charvalue`` starting at ``offset``.

        An offset of -1 starts at the end of the current data. The buffer
        grows as needed; any gap before ``offset`` is filled with zero bytes.
        """
        if offset == -1:
            offset = len(self._data)
        if offset < 0 or length < 0:
            raise ValueError("offset and length must not be negative")
        if length > _INT_MAX - offset:
            raise OverflowError("buffer size overflow")
        end = offset + length
        if end > len(self._data):
            self._data.extend(bytes(end - len(self._data)))
        self._data[offset:end] = bytes([charvalue & 0xFF]) * length

    def sprintf(self, fmt: str, *args: object) -> int:
        """Append ``fmt % args`` and return the number of bytes appended."""
        return self.append(fmt % args)

    def reset(self) -> None:
        """Discard all content."""
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __repr__(self) -> str:
        return f"PrintBuf({bytes(self._data)!r})"