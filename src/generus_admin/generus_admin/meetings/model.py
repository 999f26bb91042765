from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from ..classes.model import ClassInfo
from ..common.relations import first_or_none, get_path
from ..common.validators import optional_id


@dataclass(frozen=True)
class MeetingOrgChain:
    """Flat view of a meeting's creator, classes and organizational location.

    The location is derived through class → kelompok → desa → daerah.
    """

    teacher_id: Optional[str]
    class_id: Optional[str] = None
    class_ids: Tuple[str, ...] = ()
    kelompok_id: Optional[str] = None
    desa_id: Optional[str] = None
    daerah_id: Optional[str] = None

    @classmethod
    def from_flat_row(cls, row: Mapping[str, Any]) -> "MeetingOrgChain":
        return cls(
            teacher_id=optional_id(row.get("teacher_id")),
            class_id=optional_id(row.get("class_id")),
            class_ids=_as_ids(row.get("class_ids")),
            kelompok_id=optional_id(row.get("kelompok_id")),
            desa_id=optional_id(row.get("desa_id")),
            daerah_id=optional_id(row.get("daerah_id")),
        )

    @classmethod
    def from_joined_row(cls, row: Mapping[str, Any]) -> "MeetingOrgChain":
        """Flatten the nested `classes { kelompok { desa { daerah_id } } }` shape.

        Any hop may be an object or a one-element list.
        """

        classes = get_path(row, "classes")
        kelompok = get_path(row, "classes", "kelompok")
        desa = get_path(row, "classes", "kelompok", "desa")
        return cls(
            teacher_id=optional_id(row.get("teacher_id")),
            class_id=optional_id(row.get("class_id")),
            class_ids=_as_ids(row.get("class_ids")),
            kelompok_id=optional_id(classes.get("kelompok_id")) if isinstance(classes, dict) else None,
            desa_id=optional_id(kelompok.get("desa_id")) if isinstance(kelompok, dict) else None,
            daerah_id=optional_id(desa.get("daerah_id")) if isinstance(desa, dict) else None,
        )


@dataclass(frozen=True)
class MeetingSummary:
    """Meeting as shown in lists: its creator and every class it covers."""

    id: str
    teacher_id: Optional[str]
    classes: Tuple[ClassInfo, ...] = ()
    title: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "MeetingSummary":
        classes: list[ClassInfo] = []
        primary = first_or_none(row.get("classes"))
        if isinstance(primary, dict):
            classes.append(ClassInfo.from_row(primary))
        for extra in row.get("allClasses") or row.get("all_classes") or []:
            classes.append(ClassInfo.from_row(extra))
        return cls(
            id=str(row["id"]),
            teacher_id=optional_id(row.get("teacher_id")),
            classes=tuple(classes),
            title=row.get("title") or "",
        )


def _as_ids(value: Any) -> Tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        # comma separated when stored in a single column
        return tuple(part.strip() for part in value.split(",") if part.strip())
    return tuple(str(v) for v in value if v is not None)
