from __future__ import annotations

from typing import List, Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, load_json_column
from .model import MeetingOrgChain
from .repository import MeetingRepository, TeacherClassRepository


def _class_ids_column(value):
    # JSON array, or a plain comma separated list in older rows
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str) and not value.lstrip().startswith("["):
        return value
    return load_json_column(value)


class MySQLMeetingRepository(MeetingRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_with_org_chain(self, meeting_id: str) -> Optional[MeetingOrgChain]:
        # The class join is inner: a meeting without its class has no location.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT m.teacher_id, m.class_id, m.class_ids,
                       c.kelompok_id, k.desa_id, d.daerah_id
                FROM meetings m
                JOIN classes c ON c.id = m.class_id
                LEFT JOIN kelompok k ON k.id = c.kelompok_id
                LEFT JOIN desa d ON d.id = k.desa_id
                WHERE m.id=%s
                """,
                (meeting_id,),
            )
            row = fetchone(cur)
            if not row:
                return None
            row["class_ids"] = _class_ids_column(row.get("class_ids"))
            return MeetingOrgChain.from_flat_row(row)


class MySQLTeacherClassRepository(TeacherClassRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_class_ids(self, teacher_id: str) -> List[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT class_id FROM teacher_classes WHERE teacher_id=%s", (teacher_id,))
            return [str(r["class_id"]) for r in fetchall(cur)]
