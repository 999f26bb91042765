import pytest

from generus_admin.meetings.access import evaluate_meeting_edit
from generus_admin.meetings.model import MeetingOrgChain
from generus_admin.users.model import UserProfile


def test_missing_records_deny(superadmin, meeting_k1):
    assert evaluate_meeting_edit(None, superadmin, superadmin.id) is False
    assert evaluate_meeting_edit(meeting_k1, None, "t1") is False


def test_superadmin_allowed_anywhere(superadmin):
    chain = MeetingOrgChain(teacher_id="someone", kelompok_id="k9", desa_id="ds9", daerah_id="d9")
    assert evaluate_meeting_edit(chain, superadmin, superadmin.id) is True


def test_creator_override_is_role_independent(meeting_k1):
    creator = UserProfile(id="t1", role="student")
    assert evaluate_meeting_edit(meeting_k1, creator, "t1") is True


def test_plain_teacher_cannot_edit_colleague_meeting(meeting_k1):
    colleague = UserProfile(id="t7", role="teacher", daerah_id="d1", desa_id="ds1", kelompok_id="k1")
    assert evaluate_meeting_edit(meeting_k1, colleague, "t7") is False


def test_hierarchical_teacher_cannot_edit_colleague_meeting(meeting_k1, teacher_desa):
    assert evaluate_meeting_edit(meeting_k1, teacher_desa, teacher_desa.id) is False


@pytest.mark.parametrize(
    "admin, expected",
    [
        (UserProfile(id="a", role="admin", daerah_id="d1"), True),
        (UserProfile(id="a", role="admin", daerah_id="d2"), False),
        (UserProfile(id="a", role="admin", daerah_id="d1", desa_id="ds1"), True),
        (UserProfile(id="a", role="admin", daerah_id="d1", desa_id="ds2"), False),
        (UserProfile(id="a", role="admin", daerah_id="d1", desa_id="ds1", kelompok_id="k1"), True),
        (UserProfile(id="a", role="admin", daerah_id="d1", desa_id="ds1", kelompok_id="k2"), False),
        (UserProfile(id="a", role="admin"), False),
    ],
)
def test_admin_matched_on_own_scope(meeting_k1, admin, expected):
    assert evaluate_meeting_edit(meeting_k1, admin, admin.id) is expected


def test_admin_desa_not_granted_by_daerah_match(meeting_k1):
    # desa admin of another desa in the same daerah
    admin = UserProfile(id="a", role="admin", daerah_id="d1", desa_id="ds2")
    assert evaluate_meeting_edit(meeting_k1, admin, admin.id) is False


def test_meeting_without_location_only_for_creator_and_superadmin(superadmin, admin_daerah):
    chain = MeetingOrgChain(teacher_id="t1")
    assert evaluate_meeting_edit(chain, admin_daerah, admin_daerah.id) is False
    assert evaluate_meeting_edit(chain, superadmin, superadmin.id) is True
