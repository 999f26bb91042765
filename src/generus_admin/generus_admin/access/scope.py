"""Organizational scope resolution.

A profile's scope is the most specific non-null organizational id, checked in
the order kelompok → desa → daerah. Every role/scope predicate in this module
is a projection of that single rule.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role, ScopeLevel
from ..users.model import UserProfile


@dataclass(frozen=True)
class OrgScope:
    """Kelompok(id) | Desa(id) | Daerah(id) | Unscoped."""

    level: Optional[ScopeLevel] = None
    org_id: Optional[str] = None

    @property
    def is_scoped(self) -> bool:
        return self.level is not None

    @property
    def field_name(self) -> Optional[str]:
        """Name of the organizational field this scope filters on."""
        if self.level is None:
            return None
        return f"{self.level.value}_id"


UNSCOPED = OrgScope()


def resolve_org_scope(profile: Optional[UserProfile]) -> OrgScope:
    if profile is None:
        return UNSCOPED
    if profile.kelompok_id:
        return OrgScope(ScopeLevel.KELOMPOK, profile.kelompok_id)
    if profile.desa_id:
        return OrgScope(ScopeLevel.DESA, profile.desa_id)
    if profile.daerah_id:
        return OrgScope(ScopeLevel.DAERAH, profile.daerah_id)
    return UNSCOPED


def is_super_admin(profile: Optional[UserProfile]) -> bool:
    return profile is not None and profile.role == Role.SUPERADMIN


def is_admin(profile: Optional[UserProfile]) -> bool:
    """Admin at any level, or superadmin."""
    return profile is not None and profile.role in (Role.ADMIN, Role.SUPERADMIN)


def is_teacher(profile: Optional[UserProfile]) -> bool:
    return profile is not None and profile.role == Role.TEACHER


def is_admin_daerah(profile: Optional[UserProfile]) -> bool:
    return profile is not None and profile.role == Role.ADMIN and bool(profile.daerah_id) and not profile.desa_id


def is_admin_desa(profile: Optional[UserProfile]) -> bool:
    return profile is not None and profile.role == Role.ADMIN and bool(profile.desa_id) and not profile.kelompok_id


def is_admin_kelompok(profile: Optional[UserProfile]) -> bool:
    return profile is not None and profile.role == Role.ADMIN and bool(profile.kelompok_id)


def get_teacher_scope(profile: Optional[UserProfile]) -> Optional[ScopeLevel]:
    """Scope level of a teacher, or None for non-teachers and unscoped teachers."""
    if not is_teacher(profile):
        return None
    return resolve_org_scope(profile).level


def is_teacher_kelompok(profile: Optional[UserProfile]) -> bool:
    return get_teacher_scope(profile) == ScopeLevel.KELOMPOK


def is_teacher_desa(profile: Optional[UserProfile]) -> bool:
    return get_teacher_scope(profile) == ScopeLevel.DESA


def is_teacher_daerah(profile: Optional[UserProfile]) -> bool:
    return get_teacher_scope(profile) == ScopeLevel.DAERAH


def is_hierarchical_teacher(profile: Optional[UserProfile]) -> bool:
    """Teacher whose scope is broader than a single kelompok."""
    return get_teacher_scope(profile) in (ScopeLevel.DESA, ScopeLevel.DAERAH)
