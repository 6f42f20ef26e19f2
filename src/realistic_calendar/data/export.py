"""Hand-off of generated weeks to external calendar stores (JSON / iCalendar)."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Optional, Sequence

from ics import Calendar, Event

from .schema import CalendarEvent

logger = logging.getLogger("realistic_calendar")

DEFAULT_CALENDAR = "default"
SUPPORTED_FORMATS = ("json", "ics")


@dataclass
class ExportResult:
    exported: int = 0
    failed: int = 0
    paths: list[Path] = field(default_factory=list)

    @property
    def message(self) -> str:
        msg = f"Exported {self.exported} events to your calendar"
        if self.failed > 0:
            msg += f"\n{self.failed} events failed"
        return msg


def to_calendar_record(event: CalendarEvent, calendar: Optional[str] = None) -> dict[str, Any]:
    """Map an event to a calendar-store record; ``calendar=None`` targets the store default."""
    return {
        "title": event.title,
        "start": event.start.isoformat(),
        "end": event.end.isoformat(),
        "notes": event.notes,
        "calendar": calendar or DEFAULT_CALENDAR,
    }


def to_ics_event(event: CalendarEvent) -> Event:
    return Event(
        name=event.title,
        begin=event.start,
        end=event.end,
        description=event.notes,
        uid=_uid(event),
        categories=[event.kind.label],
    )


def build_ics_calendar(events: Iterable[CalendarEvent]) -> tuple[Calendar, int]:
    """Build an iCalendar; returns it with the number of events that failed to convert."""
    cal = Calendar()
    failed = 0
    for event in events:
        try:
            cal.events.add(to_ics_event(event))
        except (ValueError, TypeError) as exc:
            logger.warning(f"Could not convert {event.title!r} at {event.start}: {exc}")
            failed += 1
    return cal, failed


def serialize_ics(
    events: Sequence[CalendarEvent],
    calendar_name: Optional[str] = None,
) -> tuple[str, int]:
    """Serialize ``events`` to iCalendar text.

    ics stamps every time as UTC. Naive event times are local wall-clock
    times, so their DTSTART/DTEND lose the ``Z`` and are written floating;
    aware times keep the UTC instant ics produced.
    """
    cal, failed = build_ics_calendar(events)
    floating_uids = {_uid(e) for e in events if e.start.tzinfo is None}

    out: list[str] = []
    event_lines: list[str] = []
    in_event = False
    for line in cal.serialize().splitlines():
        if line == "BEGIN:VEVENT":
            in_event = True
            event_lines = [line]
            continue
        if not in_event:
            out.append(line)
            if line.startswith("VERSION:") and calendar_name:
                out.append(f"X-WR-CALNAME:{calendar_name}")
            continue
        event_lines.append(line)
        if line == "END:VEVENT":
            in_event = False
            uid = next((l[len("UID:"):] for l in event_lines if l.startswith("UID:")), None)
            if uid in floating_uids:
                event_lines = [_strip_utc(l) for l in event_lines]
            out.extend(event_lines)

    return "\r\n".join(out) + "\r\n", failed


def _uid(event: CalendarEvent) -> str:
    return f"{event.id}@realistic-calendar"


def _strip_utc(line: str) -> str:
    if (line.startswith("DTSTART") or line.startswith("DTEND")) and line.endswith("Z"):
        return line[:-1]
    return line


def save_week(
    output_dir: str | Path,
    events: Sequence[CalendarEvent],
    formats: Sequence[str] = SUPPORTED_FORMATS,
    name: str = "week",
    calendar: Optional[str] = None,
) -> ExportResult:
    """Write ``events`` to ``output_dir`` as ``<name>.json`` and/or ``<name>.ics``.

    ``calendar=None`` targets the store default calendar; a name is written
    into the JSON records and as the ICS calendar name.
    """
    unknown = [f for f in formats if f not in SUPPORTED_FORMATS]
    if unknown:
        raise ValueError(f"Unsupported export format(s): {unknown}")

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    result = ExportResult(exported=len(events))

    if "json" in formats:
        path = out / f"{name}.json"
        payload = {
            "events": [e.to_dict() for e in events],
            "records": [to_calendar_record(e, calendar) for e in events],
        }
        with open(path, "w") as f:
            json.dump(payload, f, indent=2)
        result.paths.append(path)

    if "ics" in formats:
        path = out / f"{name}.ics"
        text, failed = serialize_ics(events, calendar_name=calendar)
        with open(path, "w", newline="") as f:
            f.write(text)
        result.paths.append(path)
        result.failed = max(result.failed, failed)

    result.exported -= result.failed
    return result


def load_week_json(path: str | Path) -> list[CalendarEvent]:
    """Load events written by ``save_week``."""
    with open(path) as f:
        payload = json.load(f)
    return [CalendarEvent.from_dict(raw) for raw in payload["events"]]
