from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import optional_id
from ..core.enums import Role


def _flag(value: Any) -> Optional[bool]:
    """Coerce a stored permission flag; only explicit truthy values grant."""
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value == 1
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true"}
    return False


@dataclass(frozen=True)
class StudentPermissionFlags:
    """Granular opt-in grants for student lifecycle actions."""

    can_archive_students: Optional[bool] = None
    can_transfer_students: Optional[bool] = None
    can_soft_delete_students: Optional[bool] = None
    can_hard_delete_students: Optional[bool] = None

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> Optional["StudentPermissionFlags"]:
        if not data:
            return None
        return cls(
            can_archive_students=_flag(data.get("can_archive_students")),
            can_transfer_students=_flag(data.get("can_transfer_students")),
            can_soft_delete_students=_flag(data.get("can_soft_delete_students")),
            can_hard_delete_students=_flag(data.get("can_hard_delete_students")),
        )


@dataclass(frozen=True)
class UserProfile:
    """Snapshot of the authenticated user's profile.

    `role` is None when the stored role is not one of the known roles; every
    decision treats that as deny. The organizational ids form the chain
    kelompok ⊂ desa ⊂ daerah and the most specific non-null one is the
    profile's scope.
    """

    id: str
    role: Optional[Role]
    daerah_id: Optional[str] = None
    desa_id: Optional[str] = None
    kelompok_id: Optional[str] = None
    full_name: str = ""
    email: Optional[str] = None
    can_manage_materials: Optional[bool] = None
    permissions: Optional[StudentPermissionFlags] = None

    def __post_init__(self) -> None:
        if not isinstance(self.role, Role):
            object.__setattr__(self, "role", Role.parse(self.role))

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "UserProfile":
        permissions = row.get("permissions")
        if permissions is None:
            # flat rows carry the flags as columns
            permissions = {k: row.get(k) for k in (
                "can_archive_students",
                "can_transfer_students",
                "can_soft_delete_students",
                "can_hard_delete_students",
            ) if row.get(k) is not None}
        return cls(
            id=str(row["id"]),
            role=Role.parse(row.get("role")),
            daerah_id=optional_id(row.get("daerah_id")),
            desa_id=optional_id(row.get("desa_id")),
            kelompok_id=optional_id(row.get("kelompok_id")),
            full_name=row.get("full_name") or "",
            email=row.get("email"),
            can_manage_materials=_flag(row.get("can_manage_materials")),
            permissions=StudentPermissionFlags.from_mapping(permissions),
        )
