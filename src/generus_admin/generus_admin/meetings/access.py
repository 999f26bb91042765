from __future__ import annotations

from typing import Optional

from ..core.enums import Role
from ..users.model import UserProfile
from .model import MeetingOrgChain


def evaluate_meeting_edit(
    chain: Optional[MeetingOrgChain],
    profile: Optional[UserProfile],
    user_id: Optional[str],
) -> bool:
    """Edit/delete rule for a meeting, given both lookups already done.

    Order matters: missing records deny, superadmin allows, the creator
    allows regardless of role, then admins are matched on their own scope.
    Plain teachers never edit another teacher's meeting.
    """

    if chain is None or profile is None:
        return False

    if profile.role == Role.SUPERADMIN:
        return True

    if user_id is not None and user_id == chain.teacher_id:
        return True

    if profile.role == Role.ADMIN:
        # Independent checks; a consistent profile matches at most one level.
        if profile.daerah_id and not profile.desa_id and chain.daerah_id == profile.daerah_id:
            return True
        if profile.desa_id and not profile.kelompok_id and chain.desa_id == profile.desa_id:
            return True
        if profile.kelompok_id and chain.kelompok_id == profile.kelompok_id:
            return True

    return False
