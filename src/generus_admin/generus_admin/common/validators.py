from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_id(value: Any, field_name: str) -> str:
    """Identifiers are opaque strings (UUIDs); numbers are accepted and stringified."""
    if value is None:
        raise ValidationError(f"{field_name} is required")
    return require_non_empty(str(value), field_name)


def optional_id(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
