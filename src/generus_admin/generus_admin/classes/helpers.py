"""Class type checks used by meeting forms and meeting visibility."""

from __future__ import annotations

from ..core.constants import CABERAWIT_CATEGORY_CODES, TEACHER_CLASS_KEYWORD
from .model import ClassInfo


def is_caberawit_class(cls: ClassInfo) -> bool:
    """True when any mapped class master category is Caberawit or PAUD.

    The category code is checked first, then the category name.
    """

    for code, name in zip(cls.category_codes, cls.category_names):
        if code.upper() in CABERAWIT_CATEGORY_CODES or name.upper() in CABERAWIT_CATEGORY_CODES:
            return True
    return False


def is_teacher_class(cls: ClassInfo) -> bool:
    if not cls.name:
        return False
    return TEACHER_CLASS_KEYWORD in cls.name.lower()


def is_sambung_desa_eligible(cls: ClassInfo) -> bool:
    return not is_caberawit_class(cls) and not is_teacher_class(cls)
