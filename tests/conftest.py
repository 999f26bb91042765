from __future__ import annotations

import pytest

from generus_admin.meetings.model import MeetingOrgChain
from generus_admin.users.model import StudentPermissionFlags, UserProfile


# Make anyio run on asyncio so async service tests need no extra backend.
@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


class FakeProfileRepo:
    def __init__(self, profiles=()):
        self._profiles = {p.id: p for p in profiles}
        self.calls = []

    def get_by_id(self, user_id):
        self.calls.append(user_id)
        return self._profiles.get(user_id)


class FakeStudentRepo:
    def __init__(self, students=()):
        self._students = {s.id: s for s in students}

    def get_by_id(self, student_id):
        return self._students.get(student_id)


class FakeMeetingRepo:
    def __init__(self, meetings=None):
        self._meetings = dict(meetings or {})
        self.calls = []

    def get_with_org_chain(self, meeting_id):
        self.calls.append(meeting_id)
        return self._meetings.get(meeting_id)


class FakeTeacherClassRepo:
    def __init__(self, assignments=None):
        self._assignments = dict(assignments or {})
        self.calls = []

    def list_class_ids(self, teacher_id):
        self.calls.append(teacher_id)
        return list(self._assignments.get(teacher_id, []))


class FailingRepo:
    """Every lookup raises, as a broken database connection would."""

    def get_by_id(self, _key):
        raise RuntimeError("connection refused")

    def get_with_org_chain(self, _key):
        raise RuntimeError("connection refused")

    def list_class_ids(self, _key):
        raise RuntimeError("connection refused")


@pytest.fixture
def fakes():
    return {
        "profiles": FakeProfileRepo,
        "students": FakeStudentRepo,
        "meetings": FakeMeetingRepo,
        "teacher_classes": FakeTeacherClassRepo,
        "failing": FailingRepo,
    }


@pytest.fixture
def superadmin():
    return UserProfile(id="sa", role="superadmin", full_name="Super Admin")


@pytest.fixture
def admin_daerah():
    return UserProfile(id="ad", role="admin", daerah_id="d1")


@pytest.fixture
def admin_desa():
    return UserProfile(id="ads", role="admin", daerah_id="d1", desa_id="ds1")


@pytest.fixture
def admin_kelompok():
    return UserProfile(id="ak", role="admin", daerah_id="d1", desa_id="ds1", kelompok_id="k1")


@pytest.fixture
def teacher_kelompok():
    return UserProfile(id="t1", role="teacher", daerah_id="d1", desa_id="ds1", kelompok_id="k1")


@pytest.fixture
def teacher_desa():
    return UserProfile(id="t2", role="teacher", daerah_id="d1", desa_id="ds1")


@pytest.fixture
def teacher_daerah():
    return UserProfile(id="t3", role="teacher", daerah_id="d1")


@pytest.fixture
def student_profile():
    return UserProfile(id="s1", role="student", daerah_id="d1", desa_id="ds1", kelompok_id="k1")


@pytest.fixture
def teacher_with_grants():
    return UserProfile(
        id="t9",
        role="teacher",
        daerah_id="d1",
        desa_id="ds1",
        kelompok_id="k1",
        permissions=StudentPermissionFlags(can_archive_students=True, can_transfer_students=False),
    )


@pytest.fixture
def meeting_k1():
    return MeetingOrgChain(
        teacher_id="t1",
        class_id="c1",
        class_ids=("c1",),
        kelompok_id="k1",
        desa_id="ds1",
        daerah_id="d1",
    )
