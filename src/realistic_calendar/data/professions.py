"""Profession constants + per-profession work-activity tables.

Every probability table below is an ordered list of weighted outcomes that
sums to 1.0. Order matters: selection walks the list accumulating weights.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .schema import EventKind


class ProfessionCategory(str, Enum):
    PROFESSIONAL = "professional"
    TRADESPERSON = "tradesperson"


class Profession(str, Enum):
    # Professional
    LAWYER = "lawyer"
    ACADEMIC = "academic"
    DOCTOR = "doctor"
    ACCOUNTANT = "accountant"
    ARCHITECT = "architect"
    ENGINEER = "engineer"

    # Tradesperson
    CARPENTER = "carpenter"
    BRICKLAYER = "bricklayer"
    PLUMBER = "plumber"
    ELECTRICIAN = "electrician"
    PAINTER = "painter"
    MECHANIC = "mechanic"

    @property
    def profile(self) -> "ProfessionProfile":
        return PROFESSION_PROFILES[self]

    @property
    def display_name(self) -> str:
        return self.value.title()

    @property
    def category(self) -> ProfessionCategory:
        return self.profile.category

    @property
    def is_professional(self) -> bool:
        return self.category is ProfessionCategory.PROFESSIONAL

    @property
    def typical_start_hour(self) -> int:
        return self.profile.typical_start_hour

    @property
    def typical_end_hour(self) -> int:
        return self.profile.typical_end_hour

    @property
    def after_hours_likelihood(self) -> float:
        return self.profile.after_hours_likelihood

    @property
    def weekend_work_likelihood(self) -> float:
        return self.profile.weekend_work_likelihood

    @property
    def work_activities(self) -> tuple["WorkActivity", ...]:
        return WORK_ACTIVITIES[self]


@dataclass(frozen=True)
class ProfessionProfile:
    category: ProfessionCategory
    typical_start_hour: int
    typical_end_hour: int
    after_hours_likelihood: float  # 0-1
    weekend_work_likelihood: float  # 0-1


@dataclass(frozen=True)
class WorkActivity:
    kind: EventKind
    title: str
    probability: float


# ── Working hours by category ────────────────────────────────────────────────

CATEGORY_HOURS = {
    ProfessionCategory.PROFESSIONAL: (9, 17),
    ProfessionCategory.TRADESPERSON: (7, 15),
}


def _profile(category: ProfessionCategory, after_hours: float, weekend: float) -> ProfessionProfile:
    start, end = CATEGORY_HOURS[category]
    return ProfessionProfile(category, start, end, after_hours, weekend)


_PRO = ProfessionCategory.PROFESSIONAL
_TRADE = ProfessionCategory.TRADESPERSON

PROFESSION_PROFILES = {
    Profession.LAWYER: _profile(_PRO, 0.6, 0.4),
    Profession.ACADEMIC: _profile(_PRO, 0.4, 0.2),
    Profession.DOCTOR: _profile(_PRO, 0.6, 0.5),
    Profession.ACCOUNTANT: _profile(_PRO, 0.3, 0.15),
    Profession.ARCHITECT: _profile(_PRO, 0.4, 0.15),
    Profession.ENGINEER: _profile(_PRO, 0.4, 0.2),
    Profession.CARPENTER: _profile(_TRADE, 0.15, 0.3),
    Profession.BRICKLAYER: _profile(_TRADE, 0.15, 0.1),
    Profession.PLUMBER: _profile(_TRADE, 0.15, 0.3),
    Profession.ELECTRICIAN: _profile(_TRADE, 0.15, 0.3),
    Profession.PAINTER: _profile(_TRADE, 0.15, 0.1),
    Profession.MECHANIC: _profile(_TRADE, 0.15, 0.3),
}

# ── Work activity tables ─────────────────────────────────────────────────────

_K = EventKind

_BUILDING_TRADES = (
    WorkActivity(_K.ON_SITE, "On Site Work", 0.70),
    WorkActivity(_K.PROJECT_WORK, "Preparation", 0.15),
    WorkActivity(_K.MEETING, "Client Discussion", 0.10),
    WorkActivity(_K.PAPERWORK, "Quotes/Invoicing", 0.05),
)

_SERVICE_TRADES = (
    WorkActivity(_K.ON_SITE, "Job Site", 0.60),
    WorkActivity(_K.PROJECT_WORK, "Installation Work", 0.20),
    WorkActivity(_K.MEETING, "Client Consultation", 0.10),
    WorkActivity(_K.PAPERWORK, "Paperwork", 0.10),
)

WORK_ACTIVITIES: dict[Profession, tuple[WorkActivity, ...]] = {
    Profession.LAWYER: (
        WorkActivity(_K.MEETING, "Client Meeting", 0.30),
        WorkActivity(_K.CLIENT_CALL, "Client Call", 0.20),
        WorkActivity(_K.PAPERWORK, "Case Documentation", 0.25),
        WorkActivity(_K.PROJECT_WORK, "Legal Research", 0.25),
    ),
    Profession.ACADEMIC: (
        WorkActivity(_K.MEETING, "Lecture", 0.30),
        WorkActivity(_K.MEETING, "Tutorial", 0.20),
        WorkActivity(_K.PROJECT_WORK, "Research", 0.30),
        WorkActivity(_K.PAPERWORK, "Marking/Admin", 0.20),
    ),
    Profession.DOCTOR: (
        WorkActivity(_K.CONSULTATION, "Patient Consultation", 0.50),
        WorkActivity(_K.MEETING, "Rounds", 0.20),
        WorkActivity(_K.PAPERWORK, "Patient Notes", 0.20),
        WorkActivity(_K.MEETING, "Team Meeting", 0.10),
    ),
    Profession.ACCOUNTANT: (
        WorkActivity(_K.CLIENT_CALL, "Client Call", 0.20),
        WorkActivity(_K.PROJECT_WORK, "Financial Analysis", 0.30),
        WorkActivity(_K.PAPERWORK, "Documentation", 0.30),
        WorkActivity(_K.MEETING, "Team Meeting", 0.20),
    ),
    Profession.ARCHITECT: (
        WorkActivity(_K.PROJECT_WORK, "Design Work", 0.40),
        WorkActivity(_K.MEETING, "Client Meeting", 0.25),
        WorkActivity(_K.ON_SITE, "Site Visit", 0.20),
        WorkActivity(_K.PAPERWORK, "Documentation", 0.15),
    ),
    Profession.ENGINEER: (
        WorkActivity(_K.PROJECT_WORK, "Engineering Work", 0.45),
        WorkActivity(_K.MEETING, "Team Meeting", 0.25),
        WorkActivity(_K.ON_SITE, "Site Inspection", 0.15),
        WorkActivity(_K.PAPERWORK, "Reports", 0.15),
    ),
    Profession.CARPENTER: _BUILDING_TRADES,
    Profession.BRICKLAYER: _BUILDING_TRADES,
    Profession.PAINTER: _BUILDING_TRADES,
    Profession.PLUMBER: _SERVICE_TRADES,
    Profession.ELECTRICIAN: _SERVICE_TRADES,
    Profession.MECHANIC: (
        WorkActivity(_K.PROJECT_WORK, "Vehicle Repair", 0.60),
        WorkActivity(_K.CONSULTATION, "Customer Consultation", 0.20),
        WorkActivity(_K.PAPERWORK, "Service Documentation", 0.15),
        WorkActivity(_K.MEETING, "Parts Ordering", 0.05),
    ),
}

# Used when floating-point rounding leaves a draw unmatched.
FALLBACK_ACTIVITY = WorkActivity(_K.WORK, "Work", 0.0)

# ── Title pools ──────────────────────────────────────────────────────────────

AFTER_HOURS_TITLES = [
    "Email Catch-up",
    "Project Work",
    "Preparation for Tomorrow",
    "Review Documents",
    "Planning Session",
]

WEEKEND_WORK_TITLES = [
    "Catch-up Work",
    "Project Deadline",
    "Preparation",
    "Review Session",
    "Planning",
]


def professions_by_category(category: ProfessionCategory) -> list[Profession]:
    """Professions in declaration order, filtered to one category."""
    return [p for p in Profession if p.category is category]
