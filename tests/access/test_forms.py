from generus_admin.access.forms import (
    get_auto_filled_org_values,
    get_required_org_fields,
    should_show_daerah_filter,
    should_show_desa_filter,
    should_show_kelas_filter,
    should_show_kelompok_filter,
)
from generus_admin.users.model import UserProfile


def test_filter_visibility_narrows_with_scope(superadmin, admin_daerah, admin_desa, admin_kelompok):
    assert [should_show_daerah_filter(p) for p in (superadmin, admin_daerah, admin_desa, admin_kelompok)] == [
        True, False, False, False,
    ]
    assert [should_show_desa_filter(p) for p in (superadmin, admin_daerah, admin_desa, admin_kelompok)] == [
        True, True, False, False,
    ]
    assert [should_show_kelompok_filter(p) for p in (superadmin, admin_daerah, admin_desa, admin_kelompok)] == [
        True, True, True, False,
    ]


def test_kelas_filter_for_teachers_depends_on_class_count(teacher_kelompok, admin_kelompok, student_profile):
    assert should_show_kelas_filter(teacher_kelompok) is False
    assert should_show_kelas_filter(teacher_kelompok, has_multiple_classes=True) is True
    assert should_show_kelas_filter(admin_kelompok) is True
    assert should_show_kelas_filter(student_profile) is False


def test_required_org_fields(superadmin, admin_daerah, admin_desa, admin_kelompok, teacher_desa, student_profile):
    assert get_required_org_fields(superadmin) == {"daerah": True, "desa": True, "kelompok": True}
    assert get_required_org_fields(admin_daerah) == {"daerah": False, "desa": True, "kelompok": True}
    assert get_required_org_fields(admin_desa) == {"daerah": False, "desa": False, "kelompok": True}
    assert get_required_org_fields(admin_kelompok) == {"daerah": False, "desa": False, "kelompok": False}
    assert get_required_org_fields(teacher_desa) == {"daerah": False, "desa": False, "kelompok": False}
    assert get_required_org_fields(student_profile) == {"daerah": True, "desa": True, "kelompok": True}


def test_auto_filled_values_skip_empty_ids(admin_desa):
    assert get_auto_filled_org_values(admin_desa) == {"daerah_id": "d1", "desa_id": "ds1"}
    assert get_auto_filled_org_values(UserProfile(id="x", role="admin", desa_id="")) == {}
    assert get_auto_filled_org_values(None) == {}
