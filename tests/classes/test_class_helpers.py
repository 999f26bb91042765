from generus_admin.classes.helpers import is_caberawit_class, is_sambung_desa_eligible, is_teacher_class
from generus_admin.classes.model import ClassInfo


def _row(name, *categories, as_list=False):
    mappings = []
    for code, cat_name in categories:
        master = {"id": "cm", "name": "master", "category": {"code": code, "name": cat_name}}
        mappings.append({"class_master": [master] if as_list else master})
    return {"id": "c1", "name": name, "class_master_mappings": mappings}


def test_caberawit_by_code_or_name():
    assert is_caberawit_class(ClassInfo.from_row(_row("Kelas 1", ("caberawit", ""))))
    assert is_caberawit_class(ClassInfo.from_row(_row("PAUD A", ("", "Paud"))))
    assert not is_caberawit_class(ClassInfo.from_row(_row("Remaja", ("REMAJA", "Remaja"))))


def test_caberawit_accepts_list_shaped_class_master():
    assert is_caberawit_class(ClassInfo.from_row(_row("Kelas 2", ("PAUD", "Paud"), as_list=True)))


def test_class_without_mappings_is_not_caberawit():
    assert not is_caberawit_class(ClassInfo.from_row({"id": "c1", "name": "Kelas 1"}))
    assert not is_caberawit_class(ClassInfo.from_row({"id": "c1", "class_master_mappings": [{"class_master": None}]}))


def test_teacher_class_by_name():
    assert is_teacher_class(ClassInfo(id="c", name="Kelas Pengajar"))
    assert not is_teacher_class(ClassInfo(id="c", name="Remaja"))
    assert not is_teacher_class(ClassInfo(id="c"))


def test_sambung_desa_eligibility():
    assert is_sambung_desa_eligible(ClassInfo.from_row(_row("Remaja", ("REMAJA", "Remaja"))))
    assert not is_sambung_desa_eligible(ClassInfo.from_row(_row("Kelas 1", ("CABERAWIT", "Caberawit"))))
    assert not is_sambung_desa_eligible(ClassInfo(id="c", name="Pengajar"))
