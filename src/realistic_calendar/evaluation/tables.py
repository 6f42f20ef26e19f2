"""Console table formatting for generated weeks."""

from __future__ import annotations

from typing import Sequence

from tabulate import tabulate

from ..data.schema import CalendarEvent
from ..data.weeks import group_by_day

# Key statistics to show in the summary table
SUMMARY_METRICS = [
    "events",
    "total_hours",
    "work_hours",
    "gym_sessions",
    "lunches",
    "after_hours_sessions",
    "overlaps",
]

SHORT_NAMES = {
    "events": "Events",
    "total_hours": "Hours",
    "work_hours": "Work h",
    "gym_sessions": "Gym",
    "lunches": "Lunches",
    "after_hours_sessions": "After hrs",
    "overlaps": "Overlaps",
}


def format_duration(minutes: int) -> str:
    """``90 -> "1h 30m"``, ``120 -> "2h"``, ``45 -> "45m"``."""
    hours, mins = divmod(int(minutes), 60)
    if hours > 0 and mins > 0:
        return f"{hours}h {mins}m"
    if hours > 0:
        return f"{hours}h"
    return f"{mins}m"


def format_week_table(events: Sequence[CalendarEvent]) -> str:
    """One row per event, with a day header row carrying the day's total hours."""
    headers = ["Day", "Time", "Duration", "Title", "Kind", "Color"]
    rows = []
    for day, day_events in group_by_day(events).items():
        total = sum(e.duration_hours for e in day_events)
        rows.append([f"{day:%A, %d %B}", f"{total:.1f}h", "", "", "", ""])
        for e in day_events:
            rows.append([
                "",
                f"{e.start:%H:%M} - {e.end:%H:%M}",
                format_duration(e.duration_minutes),
                e.title,
                e.kind.label,
                e.kind.color,
            ])
    return tabulate(rows, headers=headers, tablefmt="simple")


def format_summary_table(all_summaries: dict[str, dict[str, float]]) -> str:
    """Format run summaries as a console table.

    Args:
        all_summaries: {run_name: {metric: value}}.
    """
    headers = ["Run"] + [SHORT_NAMES.get(m, m) for m in SUMMARY_METRICS]
    rows = []
    for name, res in sorted(all_summaries.items()):
        row = [name]
        for m in SUMMARY_METRICS:
            val = res.get(m, float("nan"))
            row.append(f"{val:.1f}" if isinstance(val, float) else str(val))
        rows.append(row)

    return tabulate(rows, headers=headers, tablefmt="grid")
