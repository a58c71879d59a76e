"""An insertion-ordered, open-addressing hash table.

Entries live in a fixed array of slots probed linearly. They are also
threaded on a doubly linked list in insertion order. The table doubles in
size once it is ``LOAD_FACTOR`` full.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

from .hashing import current_string_hash, ptr_hash

LOAD_FACTOR = 0.66

_INT_MAX = 2**31 - 1


class _Sentinel:
    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name


_EMPTY = _Sentinel("EMPTY")
_FREED = _Sentinel("FREED")


@dataclass(eq=False)
class LinkHashEntry:
    """A key/value record stored in a LinkHashTable."""

    key: Any
    value: Any
    constant_key: bool = False
    next: Optional["LinkHashEntry"] = field(default=None, repr=False)
    prev: Optional["LinkHashEntry"] = field(default=None, repr=False)
    _owner: Optional["LinkHashTable"] = field(default=None, repr=False)
    _slot: int = field(default=-1, repr=False)


FreeFn = Callable[[LinkHashEntry], None]
HashFn = Callable[[Any], int]
EqualFn = Callable[[Any, Any], bool]


def _c_bytes(key: Any) -> bytes:
    data = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    end = data.find(b"\0")
    return data if end < 0 else data[:end]


def _char_equal(k1: Any, k2: Any) -> bool:
    return _c_bytes(k1) == _c_bytes(k2)


def _ptr_equal(k1: Any, k2: Any) -> bool:
    return k1 is k2


class LinkHashTable:
    """Hash table that remembers insertion order and allows duplicate keys."""

    def __init__(self, size: int, free_fn: Optional[FreeFn], hash_fn: HashFn,
                 equal_fn: EqualFn) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self._size = size
        self._count = 0
        self._slots: list[Any] = [_EMPTY] * size
        self._head: Optional[LinkHashEntry] = None
        self._tail: Optional[LinkHashEntry] = None
        self.free_fn = free_fn
        self.hash_fn = hash_fn
        self.equal_fn = equal_fn

    @property
    def size(self) -> int:
        """Number of slots in the table."""
        return self._size

    @property
    def head(self) -> Optional[LinkHashEntry]:
        """The oldest entry, or None if the table is empty."""
        return self._head

    @property
    def tail(self) -> Optional[LinkHashEntry]:
        """The newest entry, or None if the table is empty."""
        return self._tail

    def get_hash(self, key: Any) -> int:
        """Return the hash of ``key`` under this table's hash function."""
        return self.hash_fn(key)

    def _place(self, entry: LinkHashEntry, h: int) -> None:
        n = h % self._size
        while self._slots[n] is not _EMPTY and self._slots[n] is not _FREED:
            n = (n + 1) % self._size
        self._slots[n] = entry
        entry._slot = n
        entry._owner = self
        self._count += 1
        entry.next = None
        if self._tail is None:
            entry.prev = None
            self._head = self._tail = entry
        else:
            entry.prev = self._tail
            self._tail.next = entry
            self._tail = entry

    def insert_with_hash(self, key: Any, value: Any, h: int,
                         constant_key: bool = False) -> LinkHashEntry:
        """Insert a record using a precalculated hash and return its entry.

        Raises OverflowError if the table cannot grow any further.
        """
        if self._count >= self._size * LOAD_FACTOR:
            if self._size == _INT_MAX:
                raise OverflowError("hash table cannot grow any further")
            new_size = _INT_MAX if self._size > _INT_MAX // 2 else self._size * 2
            self.resize(new_size)
        entry = LinkHashEntry(key, value, bool(constant_key))
        self._place(entry, h)
        return entry

    def insert(self, key: Any, value: Any) -> LinkHashEntry:
        """Insert a record and return its entry. Duplicate keys are kept."""
        return self.insert_with_hash(key, value, self.get_hash(key), False)

    def lookup_entry_with_hash(self, key: Any, h: int) -> Optional[LinkHashEntry]:
        """Find the entry for ``key`` using a precalculated hash, or None."""
        n = h % self._size
        for _ in range(self._size):
            slot = self._slots[n]
            if slot is _EMPTY:
                return None
            if slot is not _FREED and self.equal_fn(slot.key, key):
                return slot
            n = (n + 1) % self._size
        return None

    def lookup_entry(self, key: Any) -> Optional[LinkHashEntry]:
        """Find the entry for ``key``, or None if it is absent."""
        return self.lookup_entry_with_hash(key, self.get_hash(key))

    def lookup(self, key: Any) -> Any:
        """Return the value stored for ``key``; raise KeyError if absent."""
        entry = self.lookup_entry(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __contains__(self, key: Any) -> bool:
        return self.lookup_entry(key) is not None

    def delete_entry(self, entry: LinkHashEntry) -> None:
        """Remove ``entry`` from the table, calling the free function on it.

        Raises KeyError if the entry is not live in this table.
        """
        n = entry._slot
        if entry._owner is not self or not 0 <= n < self._size or self._slots[n] is not entry:
            raise KeyError(entry.key)
        self._count -= 1
        if self.free_fn is not None:
            self.free_fn(entry)
        self._slots[n] = _FREED
        if entry.prev is None:
            self._head = entry.next
        else:
            entry.prev.next = entry.next
        if entry.next is None:
            self._tail = entry.prev
        else:
            entry.next.prev = entry.prev
        entry.next = entry.prev = None
        entry._owner = None
        entry._slot = -1

    def delete(self, key: Any) -> None:
        """Remove the entry for ``key``; raise KeyError if absent."""
        entry = self.lookup_entry(key)
        if entry is None:
            raise KeyError(key)
        self.delete_entry(entry)

    def resize(self, new_size: int) -> None:
        """Rebuild the table with ``new_size`` slots, keeping insertion order."""
        if new_size <= 0:
            raise ValueError("table size must be positive")
        entries = list(self)
        self._size = new_size
        self._slots = [_EMPTY] * new_size
        self._head = self._tail = None
        self._count = 0
        for entry in entries:
            self._place(entry, self.get_hash(entry.key))

    def close(self) -> None:
        """Call the free function on every entry and empty the table."""
        if self.free_fn is not None:
            for entry in self:
                self.free_fn(entry)
        for entry in list(self):
            entry.next = entry.prev = None
            entry._owner = None
            entry._slot = -1
        self._slots = [_EMPTY] * self._size
        self._head = self._tail = None
        self._count = 0

    def __enter__(self) -> "LinkHashTable":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[LinkHashEntry]:
        """Yield entries in insertion order; deleting the current one is safe."""
        entry = self._head
        while entry is not None:
            following = entry.next
            yield entry
            entry = following


def new_string_table(size: int, free_fn: Optional[FreeFn] = None) -> LinkHashTable:
    """Create a table keyed by strings, using the selected string hash."""
    return LinkHashTable(size, free_fn, current_string_hash(), _char_equal)


def new_identity_table(size: int, free_fn: Optional[FreeFn] = None) -> LinkHashTable:
    """Create a table keyed by object identity."""
    return LinkHashTable(size, free_fn, ptr_hash, _ptr_equal)