#!/usr/bin/env python3
"""Monte-Carlo inclusion rates for the optional blocks, per profession and intensity."""

import argparse
import random
import sys
from datetime import date, timedelta
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from tabulate import tabulate

from realistic_calendar.config import GenerationConfig, WorkIntensity
from realistic_calendar.data.generators import WeekGenerator
from realistic_calendar.data.professions import Profession
from realistic_calendar.data.schema import EventKind
from realistic_calendar.evaluation.metrics import inclusion_rate
from realistic_calendar.utils import setup_logging

MONDAY = date(2024, 1, 1)
SATURDAY = MONDAY + timedelta(days=5)


def main():
    parser = argparse.ArgumentParser(description="Sample optional-block inclusion rates")
    parser.add_argument("--samples", type=int, default=2000)
    parser.add_argument("--gym-frequency", type=int, default=3)
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    log = setup_logging()
    rng = random.Random(args.seed)
    rows = []

    for profession in Profession:
        for intensity in WorkIntensity:
            cfg = GenerationConfig(
                profession=profession,
                gym_frequency=args.gym_frequency,
                include_weekend_work=True,
                include_after_hours=True,
                work_intensity=intensity,
            )
            gen = WeekGenerator(cfg, rng=rng)
            weekdays = [gen.generate_weekday(MONDAY) for _ in range(args.samples)]
            weekends = [gen.generate_weekend_day(SATURDAY) for _ in range(args.samples)]
            rows.append([
                profession.display_name,
                intensity.value,
                f"{inclusion_rate(weekdays, EventKind.GYM):.3f}",
                f"{inclusion_rate(weekdays, EventKind.AFTER_HOURS):.3f}",
                f"{inclusion_rate(weekends, EventKind.WORK):.3f}",
            ])
        log.info(f"Sampled {profession.display_name}")

    headers = ["Profession", "Intensity", "Gym (weekday)", "After hours", "Weekend work"]
    print(tabulate(rows, headers=headers, tablefmt="grid"))


if __name__ == "__main__":
    main()
