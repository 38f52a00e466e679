"""Access to catalog row fields regardless of driver identifier casing.

Depending on how the driver is configured, a catalog row may expose
``COLUMN_NAME`` or ``column_name``. Everything that reads catalog rows goes
through ``field_value`` so that tolerance lives in one place.
"""

from typing import Any

_MISSING = object()


def _get(row: Any, key: str) -> Any:
    if hasattr(row, "keys"):
        # dicts, Mapping implementations and sqlite3.Row-like objects
        return row[key] if key in row.keys() else _MISSING
    return getattr(row, key, _MISSING)


def has_field(row: Any, name: str) -> bool:
    """Whether ``row`` carries ``name`` under either spelling."""
    return any(_get(row, key) is not _MISSING for key in (name.upper(), name.lower()))


def field_value(row: Any, name: str, default: Any = None) -> Any:
    """Return the value of ``name`` from ``row``.

    The upper-case spelling is tried first, then the lower-case one. A field
    that is present with a ``None`` value resolves to ``None``; ``default`` is
    only used when neither spelling exists on the row.
    """
    for key in (name.upper(), name.lower()):
        value = _get(row, key)
        if value is not _MISSING:
            return value
    return default
