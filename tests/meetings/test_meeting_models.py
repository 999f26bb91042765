import pytest

from generus_admin.meetings.model import MeetingOrgChain, MeetingSummary


EXPECTED = MeetingOrgChain(
    teacher_id="t1",
    class_id="c1",
    class_ids=("c1", "c2"),
    kelompok_id="k1",
    desa_id="ds1",
    daerah_id="d1",
)


@pytest.mark.parametrize(
    "classes",
    [
        {"kelompok_id": "k1", "kelompok": {"desa_id": "ds1", "desa": {"daerah_id": "d1"}}},
        [{"kelompok_id": "k1", "kelompok": [{"desa_id": "ds1", "desa": [{"daerah_id": "d1"}]}]}],
        {"kelompok_id": "k1", "kelompok": [{"desa_id": "ds1", "desa": {"daerah_id": "d1"}}]},
    ],
)
def test_joined_row_shapes_flatten_to_same_chain(classes):
    row = {"teacher_id": "t1", "class_id": "c1", "class_ids": ["c1", "c2"], "classes": classes}
    assert MeetingOrgChain.from_joined_row(row) == EXPECTED


def test_joined_row_with_missing_relations():
    chain = MeetingOrgChain.from_joined_row({"teacher_id": "t1", "classes": []})
    assert chain.teacher_id == "t1"
    assert (chain.kelompok_id, chain.desa_id, chain.daerah_id) == (None, None, None)
    assert chain.class_ids == ()


def test_flat_row():
    row = {
        "teacher_id": "t1",
        "class_id": "c1",
        "class_ids": ["c1", "c2"],
        "kelompok_id": "k1",
        "desa_id": "ds1",
        "daerah_id": "d1",
    }
    assert MeetingOrgChain.from_flat_row(row) == EXPECTED


def test_flat_row_accepts_comma_separated_class_ids():
    chain = MeetingOrgChain.from_flat_row({"teacher_id": 7, "class_ids": "c1, c2"})
    assert chain.teacher_id == "7"
    assert chain.class_ids == ("c1", "c2")


def test_meeting_summary_collects_all_classes():
    row = {
        "id": "m1",
        "teacher_id": "t1",
        "classes": [{"id": "c1", "name": "Kelas 1"}],
        "allClasses": [{"id": "c2", "name": "Pengajar"}],
    }
    summary = MeetingSummary.from_row(row)
    assert [c.id for c in summary.classes] == ["c1", "c2"]
