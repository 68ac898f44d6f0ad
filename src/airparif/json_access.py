"""Typed accessors over parsed JSON values.

Every accessor either returns the typed value or raises an
:class:`~airparif.errors.AirparifError` carrying the offending key and a dump of
the JSON that was examined.
"""

from __future__ import annotations

import json
import math
from typing import Any, Mapping

from airparif.errors import MissingField, WrongType


def dump(value: Any) -> str:
    """Serialize ``value`` as compact JSON for diagnostics."""

    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _lookup(key: str, obj: Any) -> Any:
    if not isinstance(obj, Mapping) or key not in obj:
        raise MissingField(key, dump(obj))
    return obj[key]


def require_number(key: str, obj: Any) -> int:
    """Return ``obj[key]`` as a non-negative integer, truncating decimals."""

    value = _lookup(key, obj)
    if not is_number(value) or (isinstance(value, float) and not math.isfinite(value)):
        raise WrongType("number", dump(value))
    if value < 0:
        raise WrongType("non-negative number", dump(value))
    return int(value)


def require_string(key: str, obj: Any) -> str:
    value = _lookup(key, obj)
    if not isinstance(value, str):
        raise WrongType("string", dump(value))
    return value


def optional_string(key: str, obj: Any) -> str | None:
    """Probe an optional string field; a missing or mistyped value reads as absent."""

    try:
        return require_string(key, obj)
    except (MissingField, WrongType):
        return None


def string_items(key: str, obj: Any) -> list[str]:
    """Return the strings of the array at ``obj[key]``.

    A missing key or a value that is not an array yields an empty list; an
    array element that is not a string raises :class:`WrongType`.
    """

    if not isinstance(obj, Mapping):
        return []
    values = obj.get(key)
    if not isinstance(values, list):
        return []
    items: list[str] = []
    for item in values:
        if not isinstance(item, str):
            raise WrongType("string", dump(item))
        items.append(item)
    return items


__all__ = [
    "dump",
    "is_number",
    "optional_string",
    "require_number",
    "require_string",
    "string_items",
]
