"""Typed access to decoded metadata values.

Decoded TOML values are one of a closed set of shapes: string, integer,
float, boolean, array, table, or a date/time. The ``get_*`` helpers return a
value only when it has the requested shape and raise :class:`MetaTypeError`
otherwise, so callers that rely on a shape fail loudly instead of carrying a
wrong value forward.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime, time
from typing import Any, TypeVar

from tomlmeta.exceptions import MetaKeyError, MetaTypeError

_T = TypeVar("_T")


def _lookup(meta: Mapping[str, Any], key: str) -> Any:
    try:
        return meta[key]
    except KeyError:
        raise MetaKeyError(key) from None


def _expect(meta: Mapping[str, Any], key: str, kind: type[_T] | tuple[type, ...], expected: str) -> _T:
    value = _lookup(meta, key)
    # bool is an int subclass; never let it through as a number
    if isinstance(value, bool) and expected in {"integer", "float"}:
        raise MetaTypeError(key, expected, type(value).__name__)
    if not isinstance(value, kind):
        raise MetaTypeError(key, expected, type(value).__name__)
    return value  # type: ignore[return-value]


def get_str(meta: Mapping[str, Any], key: str) -> str:
    return _expect(meta, key, str, "string")


def get_int(meta: Mapping[str, Any], key: str) -> int:
    return _expect(meta, key, int, "integer")


def get_float(meta: Mapping[str, Any], key: str) -> float:
    """Return a float value; integers are widened since TOML writes ``1`` for ``1.0``."""
    return float(_expect(meta, key, (int, float), "float"))


def get_bool(meta: Mapping[str, Any], key: str) -> bool:
    return _expect(meta, key, bool, "boolean")


def get_list(meta: Mapping[str, Any], key: str) -> list[Any]:
    return _expect(meta, key, list, "array")


def get_table(meta: Mapping[str, Any], key: str) -> dict[str, Any]:
    return _expect(meta, key, dict, "table")


def get_datetime(meta: Mapping[str, Any], key: str) -> datetime | date | time:
    return _expect(meta, key, (datetime, date, time), "datetime")


def stringify(value: Any) -> str:
    """Render a decoded value as plain text.

    Args:
        value: Any value produced by the TOML decoder.

    Returns:
        Booleans as ``true``/``false``, arrays as ``[a b]``, tables as
        ``{key: value, ...}``, dates via ISO format, everything else via ``str``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(stringify(item) for item in value) + "]"
    if isinstance(value, Mapping):
        return "{" + ", ".join(f"{key}: {stringify(item)}" for key, item in value.items()) + "}"
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)
