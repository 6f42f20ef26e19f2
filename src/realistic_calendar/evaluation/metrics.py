"""Summary statistics over generated weeks.

Used for the per-day hour totals shown next to each day, for run summaries,
and for Monte-Carlo checks of inclusion rates (gym, after-hours, weekend work).
"""

from __future__ import annotations

from collections import Counter
from datetime import date
from typing import Iterable, Sequence

import numpy as np

from ..data.schema import CalendarEvent, EventKind
from ..data.weeks import group_by_day

WORK_KINDS = frozenset({
    EventKind.WORK,
    EventKind.MEETING,
    EventKind.CLIENT_CALL,
    EventKind.PROJECT_WORK,
    EventKind.PAPERWORK,
    EventKind.ON_SITE,
    EventKind.CONSULTATION,
    EventKind.AFTER_HOURS,
})


def daily_hours(events: Iterable[CalendarEvent]) -> dict[date, float]:
    """Total scheduled hours per day (overlapping blocks are counted twice)."""
    return {
        day: float(sum(e.duration_hours for e in day_events))
        for day, day_events in group_by_day(events).items()
    }


def hours_by_kind(events: Iterable[CalendarEvent]) -> dict[EventKind, float]:
    totals: dict[EventKind, float] = {}
    for e in events:
        totals[e.kind] = totals.get(e.kind, 0.0) + e.duration_hours
    return totals


def count_by_kind(events: Iterable[CalendarEvent]) -> Counter:
    return Counter(e.kind for e in events)


def inclusion_rate(days: Sequence[Sequence[CalendarEvent]], kind: EventKind) -> float:
    """Share of day event-lists containing at least one event of ``kind``."""
    if not days:
        return 0.0
    hits = np.array([any(e.kind is kind for e in day) for day in days], dtype=float)
    return float(hits.mean())


def count_overlaps(events: Sequence[CalendarEvent]) -> int:
    """Number of same-day event pairs whose intervals intersect."""
    overlaps = 0
    for day_events in group_by_day(events).values():
        for i, a in enumerate(day_events):
            for b in day_events[i + 1:]:
                if b.start >= a.end:
                    break
                overlaps += 1
    return overlaps


def summarize_week(events: Sequence[CalendarEvent]) -> dict[str, float]:
    """Headline statistics for one generated week."""
    counts = count_by_kind(events)
    by_kind = hours_by_kind(events)
    per_day = np.array(list(daily_hours(events).values()) or [0.0])
    return {
        "events": len(events),
        "days_with_events": len(group_by_day(events)),
        "total_hours": float(per_day.sum()),
        "max_day_hours": float(per_day.max()),
        "work_hours": float(sum(h for k, h in by_kind.items() if k in WORK_KINDS)),
        "gym_sessions": counts[EventKind.GYM],
        "lunches": counts[EventKind.LUNCH],
        "breaks": counts[EventKind.BREAK_TIME],
        "after_hours_sessions": counts[EventKind.AFTER_HOURS],
        "overlaps": count_overlaps(events),
    }
