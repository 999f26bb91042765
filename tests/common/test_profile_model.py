from datetime import datetime

from generus_admin.core.enums import Role, StudentStatus
from generus_admin.students.model import StudentWithOrg
from generus_admin.users.model import UserProfile


def test_profile_from_flat_row():
    profile = UserProfile.from_mapping(
        {
            "id": "u1",
            "role": "admin",
            "daerah_id": "d1",
            "desa_id": None,
            "kelompok_id": "",
            "can_manage_materials": 1,
            "can_archive_students": 1,
        }
    )
    assert profile.role == Role.ADMIN
    assert profile.kelompok_id is None
    assert profile.can_manage_materials is True
    assert profile.permissions.can_archive_students is True
    assert profile.permissions.can_transfer_students is None


def test_profile_from_nested_permissions():
    profile = UserProfile.from_mapping(
        {"id": "u2", "role": "teacher", "permissions": {"can_soft_delete_students": True}}
    )
    assert profile.permissions.can_soft_delete_students is True
    assert profile.can_manage_materials is None


def test_profile_without_flags_has_no_permissions():
    profile = UserProfile.from_mapping({"id": "u3", "role": "student", "can_manage_materials": "false"})
    assert profile.permissions is None
    assert profile.can_manage_materials is False


def test_profile_unknown_role():
    assert UserProfile.from_mapping({"id": "u4", "role": "owner"}).role is None


def test_student_from_mapping():
    student = StudentWithOrg.from_mapping(
        {"id": 5, "status": "graduated", "kelompok_id": "k1", "deleted_at": datetime(2025, 2, 1)}
    )
    assert student.id == "5"
    assert student.status == StudentStatus.GRADUATED
    assert student.is_soft_deleted
    assert not StudentWithOrg.from_mapping({"id": "6"}).is_soft_deleted


def test_student_unknown_status_is_none():
    assert StudentWithOrg.from_mapping({"id": "7", "status": "expelled"}).status is None
    assert StudentWithOrg.from_mapping({"id": "8", "status": None}).status == StudentStatus.ACTIVE
