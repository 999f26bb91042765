"""Example: access decisions without Flask or a database.

Controllers are a thin layer; every decision lives in plain functions over
profile snapshots.
"""

import asyncio

from generus_admin.access.policy import can_teacher_access_student, get_data_filter
from generus_admin.access.scope import get_teacher_scope
from generus_admin.meetings.model import MeetingOrgChain
from generus_admin.meetings.service import MeetingAccessService
from generus_admin.students.model import StudentWithOrg
from generus_admin.users.model import UserProfile


class InMemoryStore:
    def __init__(self, profiles, meetings, assignments):
        self._profiles = {p.id: p for p in profiles}
        self._meetings = meetings
        self._assignments = assignments

    def get_by_id(self, user_id):
        return self._profiles.get(user_id)

    def get_with_org_chain(self, meeting_id):
        return self._meetings.get(meeting_id)

    def list_class_ids(self, teacher_id):
        return self._assignments.get(teacher_id, [])


def main():
    guru_desa = UserProfile(id="t2", role="teacher", daerah_id="d1", desa_id="ds1")
    admin_desa = UserProfile(id="a1", role="admin", daerah_id="d1", desa_id="ds1")
    student = StudentWithOrg(id="s1", daerah_id="d1", desa_id="ds1", kelompok_id="k2")

    print("teacher scope:", get_teacher_scope(guru_desa))
    print("teacher sees student:", can_teacher_access_student(guru_desa, student))
    print("admin data filter:", get_data_filter(admin_desa))

    store = InMemoryStore(
        profiles=[guru_desa, admin_desa],
        meetings={"m1": MeetingOrgChain(teacher_id="t1", class_id="c1", kelompok_id="k1", desa_id="ds1", daerah_id="d1")},
        assignments={"t2": ["c1"]},
    )
    service = MeetingAccessService(store, store, store)
    print("admin may edit m1:", asyncio.run(service.can_edit_or_delete_meeting("m1", "a1")))
    print("teacher may edit m1:", asyncio.run(service.can_edit_or_delete_meeting("m1", "t2")))


if __name__ == "__main__":
    main()
