"""JSON Pointer (RFC 6901) lookup and assignment on parsed JSON values."""

from __future__ import annotations

from typing import Any

_INT32_MAX = 2**31 - 1


def _array_index(array: list, segment: str) -> int:
    """Validate ``segment`` as an index into ``array`` and return it."""
    if len(segment) == 1:
        if not segment.isascii() or not segment.isdigit():
            raise ValueError(f"invalid array index: {segment!r}")
        idx = int(segment)
    else:
        if segment.startswith("0"):
            raise ValueError(f"leading zeros not allowed in array index: {segment!r}")
        if not all("0" <= ch <= "9" for ch in segment):
            raise ValueError(f"invalid array index: {segment!r}")
        idx = int(segment) if segment else 0
        if idx > _INT32_MAX:
            raise ValueError(f"array index out of range: {segment!r}")
    if idx >= len(array):
        raise IndexError(f"array index {idx} out of bounds")
    return idx


def _unescape(segment: str) -> str:
    return segment.replace("~1", "/").replace("~0", "~")


def _get_single(obj: Any, segment: str) -> Any:
    if isinstance(obj, list):
        child = obj[_array_index(obj, segment)]
        if child is None:
            raise IndexError(f"array entry {segment!r} not found")
        return child
    key = _unescape(segment)
    if not isinstance(obj, dict) or key not in obj:
        raise KeyError(key)
    return obj[key]


def _set_single(parent: Any, segment: str, value: Any) -> None:
    if isinstance(parent, list):
        if segment == "-":
            parent.append(value)
            return
        parent[_array_index(parent, segment)] = value
        return
    if isinstance(parent, dict):
        parent[segment] = value
        return
    raise KeyError(segment)


def _get_path(obj: Any, path: str) -> Any:
    if not path.startswith("/"):
        raise ValueError(f"JSON pointer must start with '/': {path!r}")
    for segment in path[1:].split("/"):
        obj = _get_single(obj, segment)
    return obj


def json_pointer_get(obj: Any, path: str) -> Any:
    """Return the value inside ``obj`` that ``path`` refers to.

    Raises ValueError for a malformed pointer, KeyError or IndexError when
    the referenced value does not exist.
    """
    if obj is None or path is None:
        raise ValueError("object and path are required")
    if path == "":
        return obj
    return _get_path(obj, path)


def json_pointer_getf(obj: Any, path_fmt: str, *args: Any) -> Any:
    """Like json_pointer_get, with the path built as ``path_fmt % args``."""
    if obj is None or path_fmt is None:
        raise ValueError("object and path format are required")
    return json_pointer_get(obj, path_fmt % args)


def json_pointer_set(obj: Any, path: str, value: Any) -> Any:
    """Store ``value`` at ``path`` inside ``obj`` and return the root.

    The empty path replaces the whole document, so the returned root is
    ``value``; otherwise it is ``obj``, changed in place. ``-`` as the last
    segment appends to an array. The last segment is used as given, without
    ``~`` unescaping.
    """
    if path is None:
        raise ValueError("path is required")
    if path == "":
        return value
    if not path.startswith("/"):
        raise ValueError(f"JSON pointer must start with '/': {path!r}")
    last = path.rfind("/")
    parent = obj if last == 0 else _get_path(obj, path[:last])
    _set_single(parent, path[last + 1:], value)
    return obj


def json_pointer_setf(obj: Any, value: Any, path_fmt: str, *args: Any) -> Any:
    """Like json_pointer_set, with the path built as ``path_fmt % args``."""
    if path_fmt is None:
        raise ValueError("path format is required")
    return json_pointer_set(obj, path_fmt % args, value)