"""Make arbitrary response payloads safe to keep in a report.

Response bodies come from untrusted servers and may be decoded into anything
a client library hands back. ``sanitize`` returns a value that always encodes
as JSON, leaving already-encodable values untouched.
"""

import json
import math
from collections.abc import Mapping
from typing import Any

NON_SERIALIZABLE = "[Non-serializable {}]"
CIRCULAR = "[Circular {}]"

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def is_serializable(value: Any) -> bool:
    """Check whether ``value`` encodes as strict JSON."""
    try:
        json.dumps(value, allow_nan=False)
    except Exception:
        # TypeError/ValueError for unknown types and cycles, RecursionError for
        # deep nesting; custom containers can raise anything.
        return False
    return True


def sanitize(value: Any) -> Any:
    """Return a JSON-encodable version of ``value``.

    Never raises. Encodable input is returned unchanged; anything else is
    rebuilt, with cycles cut and unknown leaves stringified.
    """
    if is_serializable(value):
        return value
    try:
        return _rebuild(value, set())
    except Exception:
        return NON_SERIALIZABLE.format(_type_name(value))


def _rebuild(value: Any, path: set[int]) -> Any:
    if value is None or isinstance(value, (str, bool)):
        return value

    if isinstance(value, int):
        # Ints past the interpreter's digit limit cannot be converted to text
        return value if is_serializable(value) else NON_SERIALIZABLE.format(_type_name(value))

    if isinstance(value, float):
        return value if math.isfinite(value) else str(value)

    if isinstance(value, Mapping):
        if id(value) in path:
            return CIRCULAR.format(_type_name(value))
        path.add(id(value))
        try:
            result: dict[str, Any] = {}
            for key, item in value.items():
                name = key if isinstance(key, str) else _stringify(key)
                try:
                    result[name] = _rebuild(item, path)
                except Exception:
                    result[name] = NON_SERIALIZABLE.format(_type_name(item))
            return result
        finally:
            path.discard(id(value))

    if isinstance(value, _SEQUENCE_TYPES):
        if id(value) in path:
            return CIRCULAR.format(_type_name(value))
        path.add(id(value))
        try:
            return [_rebuild(item, path) for item in value]
        finally:
            path.discard(id(value))

    return _stringify(value)


def _stringify(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        pass
    try:
        return repr(value)
    except Exception:
        return NON_SERIALIZABLE.format(_type_name(value))


def _type_name(value: Any) -> str:
    return type(value).__name__
