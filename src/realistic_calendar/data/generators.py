"""Week generation: weekday and weekend routines placing time-blocked events.

Structure of a generated weekday:
1. Randomised wake time (06:00 +/- 1h, minute 0-30) seeds the day cursor
2. Optional morning gym, then commute to work, both chained off the cursor
3. Work block anchored to the profession's typical hours, filled with
   weighted work activities, one lunch, and occasional short breaks
4. Commute home from the nominal end of work, then optional family time and
   after-hours work chained off the cursor

Weekend days place up to three independent blocks (weekend work, gym,
family time) at separately drawn wall-clock hours. They may overlap.
"""

from __future__ import annotations

import logging
import random
import uuid
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Optional, Union

from ..config import GenerationConfig
from .professions import (
    AFTER_HOURS_TITLES,
    FALLBACK_ACTIVITY,
    WEEKEND_WORK_TITLES,
    WorkActivity,
)
from .sampling import bernoulli, make_rng, uniform_minutes, weighted_choice
from .schema import CalendarEvent, EventKind

logger = logging.getLogger("realistic_calendar")

# ── Placement constants ──────────────────────────────────────────────────────

WAKE_BASE_HOUR = 6
WAKE_MINUTE_RANGE = (0, 30)

WEEKDAY_GYM_MINUTES = (45, 75)
WEEKDAYS_PER_WEEK = 5.0
COMMUTE_MINUTES = {True: (20, 45), False: (15, 30)}  # keyed by is_professional
LUNCH_MINUTES = {True: (45, 60), False: (30, 45)}
FAMILY_MINUTES = (90, 180)
AFTER_HOURS_MINUTES = (60, 120)

LUNCH_START_HOUR = 12
LUNCH_END_HOUR = 14
# Latest a work activity may run to before lunch is taken; leaves room for a
# break and still lands the cursor inside the lunch window.
LUNCH_CUTOFF = time(13, 30)

WORK_EVENT_MINUTES = [30, 45, 60, 90, 120]
BREAK_MINUTES = (10, 15)
BREAK_COIN = 0.5
BREAK_PROBABILITY = 0.3

WEEKEND_WORK_HOURS = (9, 11)
WEEKEND_WORK_MINUTES = (180, 300)
WEEKEND_GYM_PROBABILITY = 0.5
WEEKEND_GYM_HOURS = (8, 10)
WEEKEND_GYM_MINUTES = (60, 90)
WEEKEND_FAMILY_HOURS = (14, 16)
WEEKEND_FAMILY_MINUTES = (120, 240)


def _minutes(n: int) -> timedelta:
    return timedelta(minutes=n)


def _at(day: date, hour: int, minute: int = 0, tz: Optional[tzinfo] = None) -> datetime:
    return datetime.combine(day, time(hour, minute), tzinfo=tz)


def _anchor(start_date: Union[date, datetime]) -> tuple[date, Optional[tzinfo]]:
    if isinstance(start_date, datetime):
        return start_date.date(), start_date.tzinfo
    return start_date, None


class WeekGenerator:
    """Generates one week of events for a fixed config.

    The random source is injected (``rng`` or ``seed``) so that a seeded run
    is reproducible. The generator keeps no state between calls beyond the
    random source itself.
    """

    def __init__(
        self,
        config: GenerationConfig,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        self.config = config
        self.rng = make_rng(rng if rng is not None else seed)

    # ── Week ─────────────────────────────────────────────────────────────

    def generate_week(self, start_date: Union[date, datetime]) -> list[CalendarEvent]:
        """Events for the 7 days beginning at ``start_date``, sorted by start.

        ``start_date`` must already be the first day of the wanted week; see
        ``weeks.start_of_week``. A datetime anchor contributes its tzinfo.
        """
        anchor, tz = _anchor(start_date)
        events: list[CalendarEvent] = []

        for offset in range(7):
            try:
                day = anchor + timedelta(days=offset)
                if day.weekday() >= 5:
                    day_events = self.generate_weekend_day(day, tz)
                else:
                    day_events = self.generate_weekday(day, tz)
            except OverflowError as exc:
                logger.warning(f"Skipping day {offset} after {anchor}: {exc}")
                continue
            logger.debug(f"{day:%a %Y-%m-%d}: {len(day_events)} events")
            events.extend(day_events)

        events.sort(key=lambda e: e.start)
        return events

    # ── Weekday ──────────────────────────────────────────────────────────

    def generate_weekday(self, day: date, tz: Optional[tzinfo] = None) -> list[CalendarEvent]:
        cfg = self.config
        profession = cfg.profession
        events: list[CalendarEvent] = []

        wake_hour, wake_minute = self._wake_time()
        cursor = _at(day, wake_hour, wake_minute, tz)

        if cfg.include_gym and self._should_schedule_gym():
            gym_end = cursor + _minutes(uniform_minutes(*WEEKDAY_GYM_MINUTES, self.rng))
            events.append(self._event("Gym", cursor, gym_end, EventKind.GYM, "Morning workout"))
            cursor = gym_end

        # Same drawn duration is reused for the trip home.
        commute = uniform_minutes(*COMMUTE_MINUTES[profession.is_professional], self.rng)
        commute_end = cursor + _minutes(commute)
        events.append(self._event("Commute to Work", cursor, commute_end, EventKind.COMMUTE))

        # Work ignores the cursor and sits on the profession's canonical hours.
        work_start = _at(day, profession.typical_start_hour, 0, tz)
        work_end = _at(day, profession.typical_end_hour, 0, tz)
        events.extend(self.generate_work_events(work_start, work_end))

        cursor = work_end
        home_end = cursor + _minutes(commute)
        events.append(self._event("Commute Home", cursor, home_end, EventKind.COMMUTE))
        cursor = home_end

        if cfg.include_family_time:
            family_end = cursor + _minutes(uniform_minutes(*FAMILY_MINUTES, self.rng))
            events.append(self._event(
                "Family Time", cursor, family_end, EventKind.FAMILY_TIME,
                "Dinner and family activities",
            ))
            cursor = family_end

        if cfg.include_after_hours and self._should_schedule_after_hours():
            after_end = cursor + _minutes(uniform_minutes(*AFTER_HOURS_MINUTES, self.rng))
            events.append(self._event(
                self.rng.choice(AFTER_HOURS_TITLES), cursor, after_end,
                EventKind.AFTER_HOURS, "Evening work session",
            ))

        return events

    def generate_work_events(self, start: datetime, end: datetime) -> list[CalendarEvent]:
        """Fill [start, end) with work activities, one lunch, and breaks.

        Nothing starts at or after ``end``; an activity that would overrun is
        clipped to finish exactly at ``end`` and closes the block.
        """
        events: list[CalendarEvent] = []
        cursor = start
        lunch_taken = False
        lunch_cutoff = datetime.combine(start.date(), LUNCH_CUTOFF, tzinfo=start.tzinfo)
        is_professional = self.config.profession.is_professional

        while cursor < end:
            if not lunch_taken and LUNCH_START_HOUR <= cursor.hour < LUNCH_END_HOUR:
                lunch_end = cursor + _minutes(
                    uniform_minutes(*LUNCH_MINUTES[is_professional], self.rng)
                )
                lunch_end = min(lunch_end, end)
                events.append(self._event("Lunch", cursor, lunch_end, EventKind.LUNCH))
                lunch_taken = True
                cursor = lunch_end
                continue

            event_end = cursor + _minutes(self._work_event_minutes())
            activity = self._pick_activity()

            if not lunch_taken and cursor < lunch_cutoff < event_end:
                event_end = lunch_cutoff

            if event_end > end:
                events.append(self._work_event(activity, cursor, end))
                break

            events.append(self._work_event(activity, cursor, event_end))
            cursor = event_end

            if self._should_take_break():
                break_end = cursor + _minutes(uniform_minutes(*BREAK_MINUTES, self.rng))
                if break_end < end:
                    events.append(self._event("Break", cursor, break_end, EventKind.BREAK_TIME))
                    cursor = break_end

        return events

    # ── Weekend ──────────────────────────────────────────────────────────

    def generate_weekend_day(self, day: date, tz: Optional[tzinfo] = None) -> list[CalendarEvent]:
        cfg = self.config
        rng = self.rng
        events: list[CalendarEvent] = []

        if cfg.include_weekend_work and self._should_schedule_weekend_work():
            start = _at(day, rng.randint(*WEEKEND_WORK_HOURS), 0, tz)
            end = start + _minutes(uniform_minutes(*WEEKEND_WORK_MINUTES, rng))
            events.append(self._event(
                rng.choice(WEEKEND_WORK_TITLES), start, end, EventKind.WORK, "Weekend catch-up",
            ))

        if cfg.include_gym and bernoulli(WEEKEND_GYM_PROBABILITY, rng):
            start = _at(day, rng.randint(*WEEKEND_GYM_HOURS), 0, tz)
            end = start + _minutes(uniform_minutes(*WEEKEND_GYM_MINUTES, rng))
            events.append(self._event("Gym", start, end, EventKind.GYM, "Weekend workout"))

        if cfg.include_family_time:
            start = _at(day, rng.randint(*WEEKEND_FAMILY_HOURS), 0, tz)
            end = start + _minutes(uniform_minutes(*WEEKEND_FAMILY_MINUTES, rng))
            events.append(self._event(
                "Family Time", start, end, EventKind.FAMILY_TIME, "Weekend family activities",
            ))

        return events

    # ── Draws ────────────────────────────────────────────────────────────

    def _wake_time(self) -> tuple[int, int]:
        hour = WAKE_BASE_HOUR + self.rng.randint(-1, 1)
        hour = max(0, min(23, hour))
        return hour, self.rng.randint(*WAKE_MINUTE_RANGE)

    def _work_event_minutes(self) -> int:
        base = self.rng.choice(WORK_EVENT_MINUTES)
        return int(base * self.config.intensity_multiplier)

    def _pick_activity(self) -> WorkActivity:
        outcomes = [(a, a.probability) for a in self.config.profession.work_activities]
        return weighted_choice(outcomes, self.rng, default=FALLBACK_ACTIVITY)

    def _should_schedule_gym(self) -> bool:
        return bernoulli(self.config.gym_frequency / WEEKDAYS_PER_WEEK, self.rng)

    def _should_schedule_after_hours(self) -> bool:
        p = self.config.profession.after_hours_likelihood * self.config.intensity_multiplier
        return bernoulli(p, self.rng)

    def _should_schedule_weekend_work(self) -> bool:
        p = self.config.profession.weekend_work_likelihood * self.config.intensity_multiplier
        return bernoulli(p, self.rng)

    def _should_take_break(self) -> bool:
        # Two independent draws, both must succeed.
        return bernoulli(BREAK_COIN, self.rng) and bernoulli(BREAK_PROBABILITY, self.rng)

    # ── Construction ─────────────────────────────────────────────────────

    def _new_id(self) -> uuid.UUID:
        return uuid.UUID(int=self.rng.getrandbits(128), version=4)

    def _event(
        self,
        title: str,
        start: datetime,
        end: datetime,
        kind: EventKind,
        notes: Optional[str] = None,
    ) -> CalendarEvent:
        return CalendarEvent(self._new_id(), title, start, end, kind, notes)

    def _work_event(self, activity: WorkActivity, start: datetime, end: datetime) -> CalendarEvent:
        return self._event(activity.title, start, end, activity.kind)


def generate_week(
    start_date: Union[date, datetime],
    config: GenerationConfig,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> list[CalendarEvent]:
    """Generate one week of events for ``config`` starting at ``start_date``."""
    return WeekGenerator(config, rng=rng, seed=seed).generate_week(start_date)
