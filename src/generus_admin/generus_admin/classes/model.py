from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from ..common.relations import first_or_none
from ..common.validators import optional_id


@dataclass(frozen=True)
class ClassInfo:
    """A kelas with the categories of the class masters it is mapped to."""

    id: Optional[str]
    name: str = ""
    kelompok_id: Optional[str] = None
    category_codes: Tuple[str, ...] = ()
    category_names: Tuple[str, ...] = ()

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "ClassInfo":
        """Build from a joined class row.

        `class_master_mappings[].class_master` may arrive as an object or as a
        one-element list; both are accepted.
        """

        codes: list[str] = []
        names: list[str] = []
        for mapping in row.get("class_master_mappings") or []:
            master = first_or_none((mapping or {}).get("class_master"))
            if not master:
                continue
            category = first_or_none(master.get("category"))
            if not category:
                continue
            codes.append(category.get("code") or "")
            names.append(category.get("name") or "")

        return cls(
            id=optional_id(row.get("id")),
            name=row.get("name") or "",
            kelompok_id=optional_id(row.get("kelompok_id")),
            category_codes=tuple(codes),
            category_names=tuple(names),
        )
