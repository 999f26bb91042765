from __future__ import annotations

from typing import Any, Optional


def first_or_none(value: Any) -> Optional[Any]:
    """Normalize a to-one relation from a joined row.

    Joined results deliver a to-one relation either as the related object or
    as a list holding it. Both shapes collapse to the object (or None).
    """

    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def get_path(row: Any, *keys: str) -> Optional[Any]:
    """Walk nested relations by key, normalizing each hop with first_or_none."""
    current = first_or_none(row)
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = first_or_none(current.get(key))
    return current
