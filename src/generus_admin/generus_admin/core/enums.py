from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class Role(str, Enum):
    """Closed set of profile roles used for authorization."""

    SUPERADMIN = "superadmin"
    ADMIN = "admin"
    TEACHER = "teacher"
    STUDENT = "student"
    MATERIAL_COORDINATOR = "material_coordinator"

    @classmethod
    def parse(cls, value: Any) -> Optional["Role"]:
        """Return the matching role, or None for anything outside the set."""
        if isinstance(value, Role):
            return value
        if not isinstance(value, str):
            return None
        # exact match only; "Admin" is not "admin"
        try:
            return cls(value)
        except ValueError:
            return None


class ScopeLevel(str, Enum):
    """Organizational tier at which a profile has standing authorization."""

    KELOMPOK = "kelompok"
    DESA = "desa"
    DAERAH = "daerah"


class StudentStatus(str, Enum):
    ACTIVE = "active"
    GRADUATED = "graduated"
    INACTIVE = "inactive"

    @classmethod
    def parse(cls, value: Any) -> Optional["StudentStatus"]:
        """Missing status means active; an unrecognized one gives None."""
        if isinstance(value, StudentStatus):
            return value
        if value is None or value == "":
            return cls.ACTIVE
        try:
            return cls(value)
        except ValueError:
            return None


class TransferStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
