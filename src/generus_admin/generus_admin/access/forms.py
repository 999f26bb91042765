"""Organization fields on create/edit forms.

Which organization selectors a profile sees, which ones it must fill in and
which ones are pre-filled from the profile itself.
"""

from __future__ import annotations

from typing import Dict, Optional

from ..core.constants import ORG_FIELDS
from ..users.model import UserProfile
from .scope import (
    is_admin_daerah,
    is_admin_desa,
    is_admin_kelompok,
    is_super_admin,
    is_teacher,
)


def should_show_daerah_filter(profile: Optional[UserProfile]) -> bool:
    return is_super_admin(profile)


def should_show_desa_filter(profile: Optional[UserProfile]) -> bool:
    return is_super_admin(profile) or is_admin_daerah(profile)


def should_show_kelompok_filter(profile: Optional[UserProfile]) -> bool:
    return is_super_admin(profile) or is_admin_daerah(profile) or is_admin_desa(profile)


def should_show_kelas_filter(profile: Optional[UserProfile], has_multiple_classes: bool = False) -> bool:
    # teachers only need the selector when they teach more than one class
    if is_teacher(profile):
        return bool(has_multiple_classes)
    return (
        is_super_admin(profile)
        or is_admin_daerah(profile)
        or is_admin_desa(profile)
        or is_admin_kelompok(profile)
    )


def get_required_org_fields(profile: Optional[UserProfile]) -> Dict[str, bool]:
    """Which of daerah/desa/kelompok the form must ask for.

    Levels at or above the profile's own scope are auto-filled and therefore
    not required.
    """

    if is_super_admin(profile):
        return {"daerah": True, "desa": True, "kelompok": True}
    if is_admin_daerah(profile):
        return {"daerah": False, "desa": True, "kelompok": True}
    if is_admin_desa(profile):
        return {"daerah": False, "desa": False, "kelompok": True}
    if is_admin_kelompok(profile) or is_teacher(profile):
        return {"daerah": False, "desa": False, "kelompok": False}
    return {"daerah": True, "desa": True, "kelompok": True}


def get_auto_filled_org_values(profile: Optional[UserProfile]) -> Dict[str, str]:
    if profile is None:
        return {}
    values: Dict[str, str] = {}
    for name in ORG_FIELDS:
        value = getattr(profile, name)
        if value:
            values[name] = value
    return values
