"""
Student lifecycle permissions.

- Archive (graduated/inactive)
- Transfer (to another organization unit or class)
- Soft delete (restorable)
- Hard delete (permanent, superadmin only, after a soft delete)
- Transfer requests (cross-organization moves wait for the destination admin)
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..core.enums import Role
from ..users.model import UserProfile
from .model import OrgUnit, StudentWithOrg, TransferRequest


def is_student_in_user_hierarchy(user: UserProfile, student: StudentWithOrg) -> bool:
    """Every organizational id the user has must match the student's."""
    if user.daerah_id and user.daerah_id != student.daerah_id:
        return False
    if user.desa_id and user.desa_id != student.desa_id:
        return False
    if user.kelompok_id and user.kelompok_id != student.kelompok_id:
        return False
    return True


def _teacher_flag(user: UserProfile, name: str) -> bool:
    if user.permissions is None:
        return False
    return getattr(user.permissions, name) is True


def _lifecycle_check(user: Optional[UserProfile], student: StudentWithOrg, flag: str) -> bool:
    if user is None:
        return False
    if user.role == Role.SUPERADMIN:
        return True
    if user.role == Role.ADMIN:
        return is_student_in_user_hierarchy(user, student)
    if user.role == Role.TEACHER:
        # an explicit grant, still bounded by the teacher's own org ids
        return _teacher_flag(user, flag) and is_student_in_user_hierarchy(user, student)
    return False


def can_archive_student(user: Optional[UserProfile], student: StudentWithOrg) -> bool:
    return _lifecycle_check(user, student, "can_archive_students")


def can_transfer_student(user: Optional[UserProfile], student: StudentWithOrg) -> bool:
    return _lifecycle_check(user, student, "can_transfer_students")


def can_soft_delete_student(user: Optional[UserProfile], student: StudentWithOrg) -> bool:
    return _lifecycle_check(user, student, "can_soft_delete_students")


def can_hard_delete_student(user: Optional[UserProfile], student: StudentWithOrg) -> bool:
    """Permanent deletion: superadmin only, and the student must be soft deleted first."""
    if user is None or user.role != Role.SUPERADMIN:
        return False
    return student.is_soft_deleted


def get_transferable_daerah_ids(user: Optional[UserProfile], all_daerah_ids: Sequence[str]) -> List[str]:
    if user is None:
        return []
    if user.role == Role.SUPERADMIN:
        return list(all_daerah_ids)
    # admins never cross a daerah boundary
    if user.role == Role.ADMIN and user.daerah_id:
        return [i for i in all_daerah_ids if i == user.daerah_id]
    return []


def get_transferable_desa_ids(
    user: Optional[UserProfile], target_daerah_id: Optional[str], all_desa_ids: Sequence[str]
) -> List[str]:
    if user is None:
        return []
    if user.role == Role.SUPERADMIN:
        return list(all_desa_ids)
    if user.role != Role.ADMIN:
        return []
    if user.daerah_id and user.daerah_id == target_daerah_id and not user.desa_id:
        return list(all_desa_ids)
    if user.desa_id:
        return [i for i in all_desa_ids if i == user.desa_id]
    return []


def get_transferable_kelompok_ids(
    user: Optional[UserProfile], target_desa_id: Optional[str], all_kelompok_ids: Sequence[str]
) -> List[str]:
    if user is None:
        return []
    if user.role == Role.SUPERADMIN:
        return list(all_kelompok_ids)
    if user.role != Role.ADMIN:
        return []
    if user.daerah_id and not user.desa_id:
        return list(all_kelompok_ids)
    if user.desa_id and user.desa_id == target_desa_id and not user.kelompok_id:
        return list(all_kelompok_ids)
    if user.kelompok_id:
        return [i for i in all_kelompok_ids if i == user.kelompok_id]
    return []


def is_organization_in_user_hierarchy(user: Optional[UserProfile], org: OrgUnit) -> bool:
    """Whether an admin's organizational ids all match `org`.

    Only admins have an organizational hierarchy here; an admin without any
    org id has none.
    """

    if user is None:
        return False
    if user.role == Role.SUPERADMIN:
        return True
    if user.role != Role.ADMIN:
        return False
    if not (user.daerah_id or user.desa_id or user.kelompok_id):
        return False
    if user.daerah_id and user.daerah_id != org.daerah_id:
        return False
    if user.desa_id and user.desa_id != org.desa_id:
        return False
    if user.kelompok_id and user.kelompok_id != org.kelompok_id:
        return False
    return True


def can_request_transfer(user: Optional[UserProfile], student: StudentWithOrg) -> bool:
    """Anyone allowed to transfer a student may file a request for it."""
    return can_transfer_student(user, student)


def can_review_transfer_request(user: Optional[UserProfile], request: TransferRequest) -> bool:
    """Approve/reject is for admins of the destination unit."""
    return is_organization_in_user_hierarchy(user, request.destination)


def needs_approval(user: Optional[UserProfile], request: TransferRequest) -> bool:
    """A move that leaves the source kelompok waits for approval, unless superadmin asks."""
    if user is not None and user.role == Role.SUPERADMIN:
        return False
    return request.source != request.destination
