from __future__ import annotations

from typing import Optional, Protocol

from .model import StudentWithOrg


class StudentRepository(Protocol):
    def get_by_id(self, student_id: str) -> Optional[StudentWithOrg]:
        raise NotImplementedError
