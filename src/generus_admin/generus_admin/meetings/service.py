from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, List, Optional

from ..access.policy import can_user_edit_meeting_attendance
from ..access.scope import is_hierarchical_teacher
from ..core.enums import Role
from ..users.model import UserProfile
from ..users.repository import ProfileRepository
from .access import evaluate_meeting_edit
from .model import MeetingOrgChain
from .repository import MeetingRepository, TeacherClassRepository

logger = logging.getLogger(__name__)


class MeetingAccessService:
    """Use case: decide who may change a meeting and its attendance rows.

    Repositories are synchronous; lookups run in worker threads so the two
    independent reads of a check can be awaited together.
    """

    def __init__(
        self,
        meetings: MeetingRepository,
        profiles: ProfileRepository,
        teacher_classes: TeacherClassRepository,
    ):
        self._meetings = meetings
        self._profiles = profiles
        self._teacher_classes = teacher_classes

    async def _lookup(self, what: str, fn: Callable[..., Any], key: str) -> Optional[Any]:
        # A failed lookup counts as "not found"; callers only see deny.
        try:
            return await asyncio.to_thread(fn, key)
        except Exception:
            logger.warning("Lookup of %s %r failed, treating as missing", what, key, exc_info=True)
            return None

    async def can_edit_or_delete_meeting(self, meeting_id: Optional[str], user_id: Optional[str]) -> bool:
        if not meeting_id or not user_id:
            return False

        chain, profile = await asyncio.gather(
            self._lookup("meeting", self._meetings.get_with_org_chain, meeting_id),
            self._lookup("profile", self._profiles.get_by_id, user_id),
        )

        if chain is None:
            logger.info("Meeting %s not found, denying edit for user %s", meeting_id, user_id)
        if profile is None:
            logger.info("Profile %s not found, denying edit on meeting %s", user_id, meeting_id)

        allowed = evaluate_meeting_edit(chain, profile, user_id)
        logger.debug("Meeting edit check meeting=%s user=%s allowed=%s", meeting_id, user_id, allowed)
        return allowed

    async def get_meeting_chain(self, meeting_id: Optional[str]) -> Optional[MeetingOrgChain]:
        if not meeting_id:
            return None
        return await self._lookup("meeting", self._meetings.get_with_org_chain, meeting_id)

    async def get_user_class_ids(self, teacher_id: str) -> List[str]:
        class_ids = await self._lookup("teacher classes", self._teacher_classes.list_class_ids, teacher_id)
        return list(class_ids or [])

    async def can_edit_attendance(
        self,
        profile: Optional[UserProfile],
        meeting_teacher_id: Optional[str],
        student_class_id: Optional[str],
    ) -> bool:
        if profile is None:
            return False

        is_creator = meeting_teacher_id is not None and meeting_teacher_id == profile.id
        hierarchical = is_hierarchical_teacher(profile)

        class_ids: List[str] = []
        needs_assignments = profile.role not in (Role.SUPERADMIN, Role.ADMIN) and not (is_creator or hierarchical)
        if needs_assignments:
            class_ids = await self.get_user_class_ids(profile.id)

        return can_user_edit_meeting_attendance(
            profile.role,
            is_creator,
            student_class_id,
            class_ids,
            hierarchical,
        )
