from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional, Tuple

from ..common.validators import optional_id
from ..core.enums import StudentStatus, TransferStatus


@dataclass(frozen=True)
class StudentWithOrg:
    """Student with the organizational ids used for access checks."""

    id: str
    daerah_id: Optional[str] = None
    desa_id: Optional[str] = None
    kelompok_id: Optional[str] = None
    # None when the stored status is not one we know
    status: Optional[StudentStatus] = StudentStatus.ACTIVE
    deleted_at: Optional[datetime] = None
    name: str = ""

    @property
    def is_soft_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def location(self) -> "OrgUnit":
        return OrgUnit(self.daerah_id, self.desa_id, self.kelompok_id)

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "StudentWithOrg":
        return cls(
            id=str(row["id"]),
            daerah_id=optional_id(row.get("daerah_id")),
            desa_id=optional_id(row.get("desa_id")),
            kelompok_id=optional_id(row.get("kelompok_id")),
            status=StudentStatus.parse(row.get("status")),
            deleted_at=row.get("deleted_at"),
            name=row.get("name") or "",
        )


@dataclass(frozen=True)
class OrgUnit:
    """A daerah / desa / kelompok triple."""

    daerah_id: Optional[str] = None
    desa_id: Optional[str] = None
    kelompok_id: Optional[str] = None


@dataclass(frozen=True)
class TransferRequest:
    """Request to move students from one organization unit to another."""

    id: Optional[str]
    student_ids: Tuple[str, ...]
    from_daerah_id: Optional[str]
    from_desa_id: Optional[str]
    from_kelompok_id: Optional[str]
    to_daerah_id: Optional[str]
    to_desa_id: Optional[str]
    to_kelompok_id: Optional[str]
    requested_by: Optional[str] = None
    status: Optional[TransferStatus] = TransferStatus.PENDING
    to_class_ids: Tuple[str, ...] = ()
    requested_at: Optional[datetime] = None
    reason: str = ""
    notes: str = ""

    @property
    def source(self) -> OrgUnit:
        return OrgUnit(self.from_daerah_id, self.from_desa_id, self.from_kelompok_id)

    @property
    def destination(self) -> OrgUnit:
        return OrgUnit(self.to_daerah_id, self.to_desa_id, self.to_kelompok_id)

    @property
    def is_pending(self) -> bool:
        return self.status == TransferStatus.PENDING

    @classmethod
    def for_student(
        cls,
        student: StudentWithOrg,
        destination: OrgUnit,
        requested_by: Optional[str],
    ) -> "TransferRequest":
        """Unsaved request moving one student from their current location."""
        return cls(
            id=None,
            student_ids=(student.id,),
            from_daerah_id=student.daerah_id,
            from_desa_id=student.desa_id,
            from_kelompok_id=student.kelompok_id,
            to_daerah_id=destination.daerah_id,
            to_desa_id=destination.desa_id,
            to_kelompok_id=destination.kelompok_id,
            requested_by=requested_by,
        )

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "TransferRequest":
        return cls(
            id=optional_id(row.get("id")),
            student_ids=tuple(str(s) for s in row.get("student_ids") or []),
            from_daerah_id=optional_id(row.get("from_daerah_id")),
            from_desa_id=optional_id(row.get("from_desa_id")),
            from_kelompok_id=optional_id(row.get("from_kelompok_id")),
            to_daerah_id=optional_id(row.get("to_daerah_id")),
            to_desa_id=optional_id(row.get("to_desa_id")),
            to_kelompok_id=optional_id(row.get("to_kelompok_id")),
            requested_by=optional_id(row.get("requested_by")),
            status=_transfer_status(row.get("status")),
            to_class_ids=tuple(str(c) for c in row.get("to_class_ids") or []),
            requested_at=row.get("requested_at"),
            reason=row.get("reason") or "",
            notes=row.get("notes") or "",
        )


def _transfer_status(value: Any) -> Optional[TransferStatus]:
    if not value:
        return TransferStatus.PENDING
    try:
        return TransferStatus(value)
    except ValueError:
        return None
