from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import MeetingOrgChain


class MeetingRepository(Protocol):
    """Read interface for meetings with their derived organizational chain."""

    def get_with_org_chain(self, meeting_id: str) -> Optional[MeetingOrgChain]:
        raise NotImplementedError


class TeacherClassRepository(Protocol):
    """Teacher → class assignments."""

    def list_class_ids(self, teacher_id: str) -> Sequence[str]:
        raise NotImplementedError
