from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .database.connection import DBConfig, DatabaseConnection
from .meetings.mysql_meeting_repository import MySQLMeetingRepository, MySQLTeacherClassRepository
from .meetings.repository import MeetingRepository, TeacherClassRepository
from .meetings.service import MeetingAccessService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .users.mysql_profile_repository import MySQLProfileRepository
from .users.repository import ProfileRepository


@dataclass(frozen=True)
class Container:
    profiles_repo: ProfileRepository
    students_repo: StudentRepository
    meetings_repo: MeetingRepository
    teacher_classes_repo: TeacherClassRepository

    meeting_access_service: MeetingAccessService


def build_container(*, db_config: Mapping[str, Any]) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    return wire_container(
        profiles_repo=MySQLProfileRepository(conn),
        students_repo=MySQLStudentRepository(conn),
        meetings_repo=MySQLMeetingRepository(conn),
        teacher_classes_repo=MySQLTeacherClassRepository(conn),
    )


def wire_container(
    *,
    profiles_repo: ProfileRepository,
    students_repo: StudentRepository,
    meetings_repo: MeetingRepository,
    teacher_classes_repo: TeacherClassRepository,
) -> Container:
    meeting_access_service = MeetingAccessService(meetings_repo, profiles_repo, teacher_classes_repo)

    return Container(
        profiles_repo=profiles_repo,
        students_repo=students_repo,
        meetings_repo=meetings_repo,
        teacher_classes_repo=teacher_classes_repo,
        meeting_access_service=meeting_access_service,
    )
