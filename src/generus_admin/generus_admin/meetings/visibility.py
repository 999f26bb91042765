from __future__ import annotations

from typing import List, Optional, Sequence

from ..access.scope import is_teacher
from ..classes.helpers import is_teacher_class
from ..classes.model import ClassInfo
from ..users.model import UserProfile
from .model import MeetingSummary


def filter_meetings_for_user(
    meetings: Sequence[MeetingSummary],
    profile: Optional[UserProfile],
    teacher_classes: Sequence[ClassInfo] = (),
) -> List[MeetingSummary]:
    """Hide Pengajar (teacher class) meetings from teachers who do not teach one.

    Admins, superadmins and anonymous callers get the list unchanged.
    """

    if profile is None or not is_teacher(profile):
        return list(meetings)

    if any(is_teacher_class(c) for c in teacher_classes):
        return list(meetings)

    return [m for m in meetings if not any(is_teacher_class(c) for c in m.classes)]
