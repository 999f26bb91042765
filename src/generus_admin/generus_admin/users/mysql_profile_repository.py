from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, load_json_column
from .model import UserProfile
from .repository import ProfileRepository


class MySQLProfileRepository(ProfileRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: str) -> Optional[UserProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, full_name, role, email, daerah_id, desa_id, kelompok_id,
                       can_manage_materials, permissions
                FROM profiles
                WHERE id=%s
                """,
                (user_id,),
            )
            row = fetchone(cur)
            if not row:
                return None
            row["permissions"] = load_json_column(row.get("permissions"))
            return UserProfile.from_mapping(row)
