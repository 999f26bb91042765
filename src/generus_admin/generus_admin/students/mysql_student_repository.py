from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import StudentWithOrg
from .repository import StudentRepository


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, student_id: str) -> Optional[StudentWithOrg]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, name, status, daerah_id, desa_id, kelompok_id, deleted_at
                FROM students
                WHERE id=%s
                """,
                (student_id,),
            )
            row = fetchone(cur)
            return StudentWithOrg.from_mapping(row) if row else None
