"""Tests for week statistics and table formatting."""

import uuid
from datetime import date, datetime, timedelta

import pytest

from realistic_calendar.config import GenerationConfig
from realistic_calendar.data.generators import generate_week
from realistic_calendar.data.professions import Profession
from realistic_calendar.data.schema import CalendarEvent, EventKind
from realistic_calendar.evaluation.metrics import (
    count_by_kind,
    count_overlaps,
    daily_hours,
    hours_by_kind,
    inclusion_rate,
    summarize_week,
)
from realistic_calendar.evaluation.tables import (
    format_duration,
    format_summary_table,
    format_week_table,
)

DAY = date(2024, 1, 6)


def _event(hour, minutes, kind=EventKind.GYM, title="Gym", day=DAY):
    start = datetime.combine(day, datetime.min.time()).replace(hour=hour)
    return CalendarEvent(uuid.uuid4(), title, start, start + timedelta(minutes=minutes), kind)


class TestMetrics:
    def test_daily_hours(self):
        events = [_event(8, 90), _event(14, 150, EventKind.FAMILY_TIME)]
        assert daily_hours(events) == {DAY: 4.0}

    def test_hours_and_counts_by_kind(self):
        events = [_event(8, 60), _event(10, 30), _event(14, 120, EventKind.FAMILY_TIME)]
        assert hours_by_kind(events) == {EventKind.GYM: 1.5, EventKind.FAMILY_TIME: 2.0}
        assert count_by_kind(events)[EventKind.GYM] == 2

    def test_inclusion_rate(self):
        days = [[_event(8, 60)], [], [_event(14, 60, EventKind.FAMILY_TIME)], [_event(9, 60)]]
        assert inclusion_rate(days, EventKind.GYM) == 0.5
        assert inclusion_rate([], EventKind.GYM) == 0.0

    def test_count_overlaps(self):
        # gym 08:00-09:30 overlaps weekend work 09:00-13:00; family at 13:00 touches only.
        events = [
            _event(8, 90),
            _event(9, 240, EventKind.WORK, "Catch-up Work"),
            _event(13, 120, EventKind.FAMILY_TIME, "Family Time"),
        ]
        assert count_overlaps(events) == 1

    def test_weekday_generation_has_no_overlaps(self):
        # Without a morning gym session, an office commute always lands before 09:00.
        cfg = GenerationConfig(
            profession=Profession.DOCTOR,
            include_gym=False,
            include_weekend_work=False,
            include_after_hours=True,
        )
        for seed in range(10):
            events = generate_week(date(2024, 1, 1), cfg, seed=seed)
            weekdays = [e for e in events if e.day.weekday() < 5]
            assert count_overlaps(weekdays) == 0

    def test_summarize_lawyer_week(self):
        cfg = GenerationConfig(
            profession=Profession.LAWYER,
            include_gym=False,
            include_family_time=False,
        )
        summary = summarize_week(generate_week(date(2024, 1, 1), cfg, seed=1))
        assert summary["days_with_events"] == 5
        assert summary["lunches"] == 5
        assert summary["gym_sessions"] == 0
        assert summary["overlaps"] == 0
        assert 30 < summary["work_hours"] < 40

    def test_summarize_empty_week(self):
        summary = summarize_week([])
        assert summary["events"] == 0
        assert summary["total_hours"] == 0.0


class TestTables:
    @pytest.mark.parametrize("minutes,expected", [
        (90, "1h 30m"),
        (120, "2h"),
        (45, "45m"),
        (0, "0m"),
    ])
    def test_format_duration(self, minutes, expected):
        assert format_duration(minutes) == expected

    def test_week_table(self):
        events = [_event(8, 90), _event(14, 150, EventKind.FAMILY_TIME, "Family Time")]
        table = format_week_table(events)
        assert "Saturday, 06 January" in table
        assert "4.0h" in table
        assert "08:00 - 09:30" in table
        assert "2h 30m" in table
        assert "Family Time" in table
        assert "orange" in table

    def test_summary_table(self):
        table = format_summary_table({"lawyer": {"events": 40, "total_hours": 52.25}})
        assert "lawyer" in table
        assert "52.2" in table or "52.3" in table
        assert "nan" in table
