"""Tests for week anchoring, grouping, and export to calendar stores."""

import uuid
import json
from datetime import date, datetime, timedelta, timezone

import pytest

from realistic_calendar.config import GenerationConfig
from realistic_calendar.data.export import (
    DEFAULT_CALENDAR,
    ExportResult,
    build_ics_calendar,
    load_week_json,
    serialize_ics,
    save_week,
    to_calendar_record,
)
from realistic_calendar.data.generators import generate_week
from realistic_calendar.data.professions import Profession
from realistic_calendar.data.schema import CalendarEvent, EventKind
from realistic_calendar.data.weeks import group_by_day, shift_week, start_of_week, week_range_label

MONDAY = date(2024, 1, 1)


@pytest.fixture
def week():
    return generate_week(MONDAY, GenerationConfig.default(Profession.ARCHITECT), seed=42)


class TestWeeks:
    def test_start_of_week_monday(self):
        assert start_of_week(date(2024, 1, 4)) == MONDAY
        assert start_of_week(MONDAY) == MONDAY
        assert start_of_week(date(2024, 1, 7)) == MONDAY
        assert start_of_week(datetime(2024, 1, 3, 15, 30)) == MONDAY

    def test_start_of_week_sunday_first(self):
        assert start_of_week(date(2024, 1, 4), first_weekday=6) == date(2023, 12, 31)

    def test_start_of_week_rejects_bad_weekday(self):
        with pytest.raises(ValueError):
            start_of_week(MONDAY, first_weekday=7)

    def test_shift_week(self):
        assert shift_week(MONDAY, 1) == date(2024, 1, 8)
        assert shift_week(MONDAY, -1) == date(2023, 12, 25)

    def test_week_range_label(self):
        assert week_range_label(MONDAY) == "1 Jan - 7 Jan, 2024"
        assert week_range_label(date(2024, 12, 30)) == "30 Dec - 5 Jan, 2025"

    def test_group_by_day(self, week):
        days = group_by_day(week)
        assert list(days) == sorted(days)
        assert sum(len(v) for v in days.values()) == len(week)
        for day, events in days.items():
            assert all(e.day == day for e in events)
            assert [e.start for e in events] == sorted(e.start for e in events)


class TestExport:
    def test_record_targets_default_calendar(self, week):
        record = to_calendar_record(week[0])
        assert record["calendar"] == DEFAULT_CALENDAR
        assert record["title"] == week[0].title
        assert record["start"] == week[0].start.isoformat()
        assert record["notes"] == week[0].notes
        assert to_calendar_record(week[0], "Work")["calendar"] == "Work"

    def test_ics_has_every_event(self, week):
        cal, failed = build_ics_calendar(week)
        assert failed == 0
        assert len(cal.events) == len(week)
        text = cal.serialize()
        assert text.count("BEGIN:VEVENT") == len(week)
        assert "SUMMARY:Commute to Work" in text

    def test_save_and_reload_json(self, tmp_path, week):
        result = save_week(tmp_path, week, formats=["json"], name="arch")
        assert result.exported == len(week)
        assert result.failed == 0
        assert result.paths == [tmp_path / "arch.json"]
        back = load_week_json(tmp_path / "arch.json")
        assert [e.id for e in back] == [e.id for e in week]
        assert [(e.start, e.end, e.kind) for e in back] == [(e.start, e.end, e.kind) for e in week]

    def test_save_both_formats(self, tmp_path, week):
        result = save_week(tmp_path / "out", week, name="arch")
        assert sorted(p.name for p in result.paths) == ["arch.ics", "arch.json"]
        assert all(p.exists() for p in result.paths)

    def test_unknown_format(self, tmp_path, week):
        with pytest.raises(ValueError):
            save_week(tmp_path, week, formats=["csv"])

    def test_result_message(self):
        assert ExportResult(exported=12).message == "Exported 12 events to your calendar"
        assert ExportResult(exported=10, failed=2).message.endswith("\n2 events failed")

    def test_notes_optional(self):
        start = datetime(2024, 1, 2, 9)
        event = CalendarEvent(uuid.uuid4(), "Lunch", start, start + timedelta(minutes=45), EventKind.LUNCH)
        cal, failed = build_ics_calendar([event])
        assert failed == 0
        assert len(cal.events) == 1


def _vevents(text):
    """Split ICS text into one line list per VEVENT."""
    blocks, current = [], None
    for line in text.splitlines():
        if line == "BEGIN:VEVENT":
            current = []
        elif line == "END:VEVENT":
            blocks.append(current)
            current = None
        elif current is not None:
            current.append(line)
    return blocks


def _field(block, key):
    return next(l for l in block if l.split(":", 1)[0].split(";", 1)[0] == key)


class TestIcsTimes:
    @pytest.fixture
    def lawyer_week(self):
        return generate_week(MONDAY, GenerationConfig(include_gym=False), seed=1)

    def test_local_times_written_floating(self, lawyer_week):
        text, failed = serialize_ics(lawyer_week)
        assert failed == 0
        blocks = _vevents(text)
        assert len(blocks) == len(lawyer_week)
        for block in blocks:
            assert not _field(block, "DTSTART").endswith("Z")
            assert not _field(block, "DTEND").endswith("Z")

    def test_commute_home_keeps_wall_clock(self, lawyer_week):
        text, _ = serialize_ics(lawyer_week)
        starts = [
            _field(b, "DTSTART") for b in _vevents(text)
            if _field(b, "SUMMARY") == "SUMMARY:Commute Home"
        ]
        assert "DTSTART:20240101T170000" in starts
        assert all(s.endswith("T170000") for s in starts)

    def test_aware_times_keep_utc_instant(self):
        anchor = datetime(2024, 1, 1, tzinfo=timezone.utc)
        events = generate_week(anchor, GenerationConfig(include_gym=False), seed=1)
        text, _ = serialize_ics(events)
        starts = [
            _field(b, "DTSTART") for b in _vevents(text)
            if _field(b, "SUMMARY") == "SUMMARY:Commute Home"
        ]
        assert "DTSTART:20240101T170000Z" in starts

    def test_written_file_is_floating(self, tmp_path, lawyer_week):
        save_week(tmp_path, lawyer_week, formats=["ics"], name="lawyer")
        text = (tmp_path / "lawyer.ics").read_text()
        assert "DTSTART:20240101T170000\n" in text.replace("\r\n", "\n")


class TestCalendarTarget:
    def test_default_records_target_store_default(self, tmp_path, week):
        save_week(tmp_path, week, formats=["json"], name="arch")
        payload = json.loads((tmp_path / "arch.json").read_text())
        assert {r["calendar"] for r in payload["records"]} == {DEFAULT_CALENDAR}

    def test_default_ics_has_no_calendar_name(self, week):
        text, _ = serialize_ics(week)
        assert "X-WR-CALNAME" not in text

    def test_named_calendar_reaches_json_and_ics(self, tmp_path, week):
        save_week(tmp_path, week, name="arch", calendar="Work")
        payload = json.loads((tmp_path / "arch.json").read_text())
        assert {r["calendar"] for r in payload["records"]} == {"Work"}
        assert "X-WR-CALNAME:Work" in (tmp_path / "arch.ics").read_text()
