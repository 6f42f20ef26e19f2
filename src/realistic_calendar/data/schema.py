"""CalendarEvent dataclass + the closed set of event kinds."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Any, Optional


class EventKind(str, Enum):
    WORK = "work"
    MEETING = "meeting"
    CLIENT_CALL = "clientCall"
    PROJECT_WORK = "projectWork"
    PAPERWORK = "paperwork"
    ON_SITE = "onSite"
    CONSULTATION = "consultation"
    GYM = "gym"
    FAMILY_TIME = "familyTime"
    BREAK_TIME = "breakTime"
    LUNCH = "lunch"
    COMMUTE = "commute"
    AFTER_HOURS = "afterHours"

    @property
    def label(self) -> str:
        return EVENT_KIND_LABELS[self]

    @property
    def color(self) -> str:
        return EVENT_KIND_COLORS[self]


EVENT_KIND_LABELS = {
    EventKind.WORK: "Work",
    EventKind.MEETING: "Meeting",
    EventKind.CLIENT_CALL: "Client Call",
    EventKind.PROJECT_WORK: "Project Work",
    EventKind.PAPERWORK: "Paperwork",
    EventKind.ON_SITE: "On Site",
    EventKind.CONSULTATION: "Consultation",
    EventKind.GYM: "Gym",
    EventKind.FAMILY_TIME: "Family Time",
    EventKind.BREAK_TIME: "Break",
    EventKind.LUNCH: "Lunch",
    EventKind.COMMUTE: "Commute",
    EventKind.AFTER_HOURS: "After Hours Work",
}

# Display metadata only; generation never looks at colors.
EVENT_KIND_COLORS = {
    EventKind.WORK: "blue",
    EventKind.MEETING: "blue",
    EventKind.CLIENT_CALL: "blue",
    EventKind.PROJECT_WORK: "blue",
    EventKind.ON_SITE: "blue",
    EventKind.CONSULTATION: "blue",
    EventKind.PAPERWORK: "purple",
    EventKind.GYM: "green",
    EventKind.FAMILY_TIME: "orange",
    EventKind.BREAK_TIME: "gray",
    EventKind.LUNCH: "gray",
    EventKind.COMMUTE: "yellow",
    EventKind.AFTER_HOURS: "red",
}


@dataclass(frozen=True)
class CalendarEvent:
    """A single time-blocked calendar entry.

    Events are immutable once created. Equality is by ``id`` only, so two
    events with the same title and times from different runs are distinct.
    """

    id: uuid.UUID
    title: str
    start: datetime
    end: datetime
    kind: EventKind
    notes: Optional[str] = None

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError(
                f"Event {self.title!r} must end after it starts ({self.start} -> {self.end})"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarEvent):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def duration_minutes(self) -> int:
        return int(self.duration.total_seconds() // 60)

    @property
    def duration_hours(self) -> float:
        return self.duration.total_seconds() / 3600

    @property
    def day(self) -> date:
        return self.start.date()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "title": self.title,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "kind": self.kind.value,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "CalendarEvent":
        return cls(
            id=uuid.UUID(raw["id"]),
            title=raw["title"],
            start=datetime.fromisoformat(raw["start"]),
            end=datetime.fromisoformat(raw["end"]),
            kind=EventKind(raw["kind"]),
            notes=raw.get("notes"),
        )
