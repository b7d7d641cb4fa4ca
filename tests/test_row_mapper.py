from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from listings.core import to_utc
from listings.models import Event, Race, Status
from listings.services import EVENT_SCHEMA, RACE_SCHEMA, RowConversionError, scan_row, scan_rows
from listings.services.query import derive_status


def _race_row(start, race_id=1, name="Ascot Hawks"):
    return (race_id, 4, name, 7, 1, start)


def test_scan_rows_past_start_is_closed():
    start = datetime.now(timezone.utc) - timedelta(hours=24)

    races = scan_rows([_race_row(start)], RACE_SCHEMA)

    assert races == [
        Race(
            id=1,
            meeting_id=4,
            name="Ascot Hawks",
            number=7,
            visible=True,
            advertised_start_time=start,
            status=Status.CLOSED,
        )
    ]


def test_scan_rows_future_start_is_open():
    start = datetime.now(timezone.utc) + timedelta(hours=24)

    races = scan_rows([_race_row(start)], RACE_SCHEMA)

    assert len(races) == 1
    assert races[0].status is Status.OPEN
    assert races[0].advertised_start_time == start


def test_scan_rows_zero_rows_is_empty_list():
    assert scan_rows([], RACE_SCHEMA) == []


def test_scan_row_missing_row_is_none():
    assert scan_row(None, EVENT_SCHEMA) is None


def test_scan_row_event_columns():
    start = "2030-01-01 09:30:00.000000"

    event = scan_row(
        (9, "Rugby", "Super League", "Australia", 5, "Hawks vs Lions", 3, 2, 0, start),
        EVENT_SCHEMA,
    )

    assert isinstance(event, Event)
    assert event.location_id == 5
    assert event.round == 3
    assert event.visible is False
    assert event.advertised_start_time == datetime(2030, 1, 1, 9, 30, tzinfo=timezone.utc)
    assert event.status is Status.OPEN


@pytest.mark.parametrize(
    "stored, expected",
    [
        ("2024-03-01T10:00:00Z", datetime(2024, 3, 1, 10, tzinfo=timezone.utc)),
        ("2024-03-01T20:00:00+10:00", datetime(2024, 3, 1, 10, tzinfo=timezone.utc)),
        ("2024-03-01 10:00:00.000000", datetime(2024, 3, 1, 10, tzinfo=timezone.utc)),
        (datetime(2024, 3, 1, 10), datetime(2024, 3, 1, 10, tzinfo=timezone.utc)),
    ],
)
def test_stored_timestamps_convert_to_utc(stored, expected):
    assert to_utc(stored) == expected


def test_bad_timestamp_aborts_batch():
    good = _race_row(datetime.now(timezone.utc), race_id=1)
    bad = _race_row("not a time", race_id=2)

    with pytest.raises(RowConversionError, match="advertised_start_time"):
        scan_rows([good, bad, good], RACE_SCHEMA)


def test_null_timestamp_is_a_conversion_error():
    with pytest.raises(RowConversionError):
        scan_row(_race_row(None), RACE_SCHEMA)


def test_invalid_attribute_is_a_conversion_error():
    with pytest.raises(RowConversionError):
        scan_row(_race_row(datetime.now(timezone.utc), name=None), RACE_SCHEMA)


def test_column_count_mismatch_is_a_programming_error():
    with pytest.raises(TypeError):
        scan_row((1, 2, 3), RACE_SCHEMA)


def test_status_reads_clock_once_per_row():
    start = datetime(2030, 1, 1, 12, tzinfo=timezone.utc)
    ticks = iter([start - timedelta(seconds=1), start])
    calls = []

    def clock():
        now = next(ticks)
        calls.append(now)
        return now

    races = scan_rows([_race_row(start, race_id=1), _race_row(start, race_id=2)], RACE_SCHEMA, now=clock)

    assert len(calls) == 2
    assert [race.status for race in races] == [Status.OPEN, Status.CLOSED]


def test_derive_status_equal_time_is_closed():
    start = datetime(2030, 1, 1, tzinfo=timezone.utc)

    assert derive_status(start, lambda: start) is Status.CLOSED
    assert derive_status(start, lambda: start - timedelta(microseconds=1)) is Status.OPEN
