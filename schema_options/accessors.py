from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Iterable, Optional

from .constants import ITEMS_KEY, PROPERTIES_KEY
from .paths import split_path

_MISSING = object()


def is_sequence(value: Any) -> bool:
    """True for JSON arrays (lists/tuples), never for strings or bytes."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def get_in(data: Any, keys: Iterable[Any], default: Any = None) -> Any:
    """Follow ``keys`` through nested mappings/sequences.

    Returns ``default`` as soon as a step is missing or lands on a value that
    cannot be indexed. A key that is present with a ``None`` value is a hit,
    not a miss.
    """
    current = data
    for key in keys:
        if isinstance(current, Mapping):
            current = current.get(key, _MISSING)
        elif is_sequence(current) and isinstance(key, int) and not isinstance(key, bool):
            current = current[key] if -len(current) <= key < len(current) else _MISSING
        else:
            return default
        if current is _MISSING:
            return default
    return current


def get_mapping(data: Any, key: Any) -> Optional[Mapping]:
    value = get_in(data, [key])
    return value if isinstance(value, Mapping) else None


def get_sequence(data: Any, key: Any) -> Optional[Sequence]:
    value = get_in(data, [key])
    return value if is_sequence(value) else None


def get_subschema(schema: Any, path: str) -> Optional[Mapping]:
    """Return the sub-schema at a field path such as ``'address.country'``.

    Each segment is looked up under ``properties``; the segment ``items``
    descends into an array's item schema when the current schema has no
    property of that name.
    """
    current = schema
    for segment in split_path(path):
        if not isinstance(current, Mapping):
            return None
        props = get_mapping(current, PROPERTIES_KEY)
        if props is not None and segment in props:
            current = props[segment]
        elif segment == ITEMS_KEY and isinstance(current.get(ITEMS_KEY), Mapping):
            current = current[ITEMS_KEY]
        else:
            return None
    return current if isinstance(current, Mapping) else None


def get_sub_overlay(overlay: Any, path: str) -> Optional[Mapping]:
    """Return the overlay fragment that parallels ``get_subschema`` for ``path``.

    Overlay trees are keyed by property name directly (no ``properties``
    level), so the walk is a plain nested lookup.
    """
    value = get_in(overlay, split_path(path)) if overlay is not None else None
    return value if isinstance(value, Mapping) else None
