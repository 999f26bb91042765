"""Access decisions over already-loaded profiles and records.

Every function here is pure: no lookups, no caching, and every missing or
unrecognized input resolves to deny (False / None).
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, TypeVar, Union

from ..core.constants import ADMIN_FEATURES
from ..core.enums import Role, ScopeLevel
from ..students.model import StudentWithOrg
from ..users.model import UserProfile
from .scope import get_teacher_scope, resolve_org_scope

DataFilter = Dict[str, Optional[str]]
T = TypeVar("T")


def _role(profile: Optional[UserProfile]) -> Optional[Role]:
    return profile.role if profile is not None else None


def can_teacher_access_student(teacher: Optional[UserProfile], student: StudentWithOrg) -> bool:
    """Containment check: the teacher's scope id must equal the student's id at that level."""
    scope = get_teacher_scope(teacher)
    if scope == ScopeLevel.KELOMPOK:
        return student.kelompok_id == teacher.kelompok_id
    if scope == ScopeLevel.DESA:
        return student.desa_id == teacher.desa_id
    if scope == ScopeLevel.DAERAH:
        return student.daerah_id == teacher.daerah_id
    return False


def can_access_feature(profile: Optional[UserProfile], feature: str) -> bool:
    role = _role(profile)
    if role == Role.SUPERADMIN:
        return True
    if role == Role.ADMIN:
        return feature in ADMIN_FEATURES
    return False


def get_data_filter(profile: Optional[UserProfile]) -> Optional[DataFilter]:
    """Row filter for listing queries.

    `{}` means unrestricted, `None` means no queryable access. An admin's ids
    are returned as stored, nulls included; callers apply the non-null ones.
    """

    role = _role(profile)
    if role == Role.SUPERADMIN:
        return {}
    if role == Role.ADMIN:
        return {
            "daerah_id": profile.daerah_id,
            "desa_id": profile.desa_id,
            "kelompok_id": profile.kelompok_id,
        }
    return None


def get_scope_filter(profile: Optional[UserProfile]) -> Optional[DataFilter]:
    """Single-field filter on the most specific organizational id.

    Used by server routines that only need the scope-defining column. Teachers
    get a filter as well; an admin or teacher without any org id gets None.
    """

    role = _role(profile)
    if role == Role.SUPERADMIN:
        return {}
    if role not in (Role.ADMIN, Role.TEACHER):
        return None
    scope = resolve_org_scope(profile)
    if not scope.is_scoped:
        return None
    return {scope.field_name: scope.org_id}


def _field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def matches_data_filter(record: Any, data_filter: Optional[DataFilter]) -> bool:
    if data_filter is None:
        return False
    for key, value in data_filter.items():
        if value is None:
            continue
        if _field(record, key) != value:
            return False
    return True


def filter_records(records: Iterable[T], data_filter: Optional[DataFilter]) -> List[T]:
    if data_filter is None:
        return []
    return [r for r in records if matches_data_filter(r, data_filter)]


def can_user_edit_meeting_attendance(
    user_role: Union[Role, str, None],
    is_meeting_creator: bool,
    student_class_id: Optional[str],
    user_class_ids: Sequence[str],
    is_hierarchical_teacher: bool = False,
) -> bool:
    """Whether one attendance row of a meeting may be edited by the caller.

    A non-creator, non-hierarchical teacher may only edit students of the
    classes they are assigned to, even inside the same meeting.
    """

    role = Role.parse(user_role)
    if role in (Role.SUPERADMIN, Role.ADMIN):
        return True
    if role is None or role == Role.STUDENT:
        return False
    if is_hierarchical_teacher:
        return True
    if is_meeting_creator:
        return True
    return student_class_id is not None and student_class_id in user_class_ids


def can_manage_materials(profile: Optional[UserProfile]) -> bool:
    """Explicit opt-in flag, independent of role."""
    return profile is not None and profile.can_manage_materials is True


def is_material_coordinator(profile: Optional[UserProfile]) -> bool:
    return _role(profile) == Role.MATERIAL_COORDINATOR


def allowed_features(profile: Optional[UserProfile], features: Iterable[str]) -> List[str]:
    return [f for f in features if can_access_feature(profile, f)]


def can_view_student(profile: Optional[UserProfile], student: StudentWithOrg) -> bool:
    """Read access to one student record.

    Admins are matched through their data filter, teachers through their
    scope; every other role is denied.
    """

    role = _role(profile)
    if role == Role.SUPERADMIN:
        return True
    if role == Role.ADMIN:
        return matches_data_filter(student, get_data_filter(profile))
    if role == Role.TEACHER:
        return can_teacher_access_student(profile, student)
    return False
