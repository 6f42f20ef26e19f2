"""Week anchoring and per-day grouping for callers of the generator."""

from __future__ import annotations

from collections import OrderedDict
from datetime import date, datetime, timedelta
from typing import Iterable, Union

from .schema import CalendarEvent


def start_of_week(day: Union[date, datetime], first_weekday: int = 0) -> date:
    """First day of the week containing ``day`` (0 = Monday ... 6 = Sunday)."""
    if isinstance(day, datetime):
        day = day.date()
    if not 0 <= first_weekday <= 6:
        raise ValueError(f"first_weekday must be in 0..6, got {first_weekday}")
    return day - timedelta(days=(day.weekday() - first_weekday) % 7)


def shift_week(day: date, weeks: int) -> date:
    return day + timedelta(weeks=weeks)


def week_range_label(week_start: date) -> str:
    """e.g. ``"6 Jan - 12 Jan, 2025"``; the year is taken from the week's end."""
    week_end = week_start + timedelta(days=6)
    return f"{week_start.day} {week_start:%b} - {week_end.day} {week_end:%b}, {week_end.year}"


def group_by_day(events: Iterable[CalendarEvent]) -> "OrderedDict[date, list[CalendarEvent]]":
    """Map each calendar day to its events, both in ascending order."""
    days: dict[date, list[CalendarEvent]] = {}
    for event in events:
        days.setdefault(event.day, []).append(event)
    return OrderedDict(
        (day, sorted(days[day], key=lambda e: e.start)) for day in sorted(days)
    )
