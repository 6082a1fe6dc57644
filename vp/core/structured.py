"""Helpers for reading untyped JSON/TOML payloads.

API responses and config files arrive as ``object``; these helpers narrow
them at the boundary so models never index into raw dicts.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]
ObjList = list[object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    if is_str_dict(obj):
        return obj
    return None


def as_obj_list(obj: object) -> ObjList | None:
    if isinstance(obj, list):
        return cast(ObjList, obj)
    return None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value, stripping whitespace.

    Returns None if missing, not a str, or empty after stripping.
    """
    value = table.get(key)
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def get_int(table: Mapping[str, object], key: str) -> int | None:
    """Get an int value. Booleans are rejected even though they are ints."""
    value = table.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def get_float(table: Mapping[str, object], key: str) -> float | None:
    value = table.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def get_bool(table: Mapping[str, object], key: str) -> bool | None:
    value = table.get(key)
    if not isinstance(value, bool):
        return None
    return value


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Get a nested table (dict with string keys)."""
    return as_str_dict(table.get(key))


def get_list(table: Mapping[str, object], key: str) -> ObjList | None:
    return as_obj_list(table.get(key))


def get_path(table: Mapping[str, object], *keys: str) -> StrDict | None:
    """Walk nested tables, e.g. ``get_path(d, "installationTypes", "embeddedCluster")``."""
    current: StrDict | None = as_str_dict(table)
    for key in keys:
        if current is None:
            return None
        current = get_table(current, key)
    return current


def get_str_list(table: Mapping[str, object], key: str) -> list[str]:
    """Get a list of strings, skipping non-string items. Order is preserved."""
    items = get_list(table, key) or []
    return [item for item in items if isinstance(item, str)]


def get_text(table: Mapping[str, object], key: str) -> str:
    """Get a string value verbatim, or ``""`` if missing or not a str.

    Unlike ``get_str`` nothing is stripped; release versions and image
    references are compared byte for byte.
    """
    value = table.get(key)
    if not isinstance(value, str):
        return ""
    return value
