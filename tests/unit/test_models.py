from __future__ import annotations

import dataclasses

import pytest

from live_records.models import (
    ConcertRecord,
    ExtractionFailure,
    ExtractionSuccess,
    MedleyEnd,
    MedleyStart,
    RecordLayout,
    Song,
)


def _record(**overrides) -> ConcertRecord:
    values = dict(
        tour_name="夏ツアー",
        date="2024/05/03",
        year=2024,
        day_of_week="金",
        region="関東",
        venue="日本武道館",
        song_count=2,
        setlist=(Song("A"), MedleyStart(), Song("M1"), MedleyEnd()),
    )
    values.update(overrides)
    return ConcertRecord(**values)


def test_concert_record_to_dict_uses_tagged_entries():
    assert _record().to_dict() == {
        "tourName": "夏ツアー",
        "date": "2024/05/03",
        "year": 2024,
        "dayOfWeek": "金",
        "region": "関東",
        "venue": "日本武道館",
        "songCount": 2,
        "setlist": [
            {"type": "song", "name": "A"},
            {"type": "medley_start"},
            {"type": "song", "name": "M1"},
            {"type": "medley_end"},
        ],
    }


def test_concert_record_is_immutable():
    record = _record()
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.venue = "x"  # type: ignore[misc]


def test_markers_are_not_songs():
    # マーカーは曲名と取り違えられない
    assert MedleyStart() != Song("__MEDLEY_START__")
    assert MedleyStart() == MedleyStart()
    assert MedleyStart() != MedleyEnd()


def test_extraction_outcomes():
    success = ExtractionSuccess(records=(_record(),), scanned_rows=4)
    failure = ExtractionFailure(sheet_name="記録", diagnostic="records sheet '記録' not found")
    assert success.ok and not failure.ok
    assert success.skipped_rows == 3


def test_record_layout_from_mapping():
    assert RecordLayout.from_mapping(None) == RecordLayout()
    layout = RecordLayout.from_mapping({"date_column": 2, "unknown": 1, "weekday_labels": list("1234567")})
    assert layout.date_column == 2
    assert layout.weekday_labels == tuple("1234567")
    assert layout.setlist_start_column == 13
