#!/usr/bin/env python3
"""Generate every config in configs/ for the same week and print a summary table."""

import argparse
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from realistic_calendar.config import load_configs_for_run
from realistic_calendar.data.export import save_week
from realistic_calendar.data.generators import generate_week
from realistic_calendar.data.weeks import start_of_week, week_range_label
from realistic_calendar.evaluation.metrics import summarize_week
from realistic_calendar.evaluation.tables import format_summary_table
from realistic_calendar.utils import setup_logging

SCRIPTS_DIR = Path(__file__).resolve().parent
CONFIGS_DIR = SCRIPTS_DIR.parent / "configs"


def main():
    parser = argparse.ArgumentParser(description="Generate all configured weeks")
    parser.add_argument("--config-dir", type=str, default=str(CONFIGS_DIR))
    parser.add_argument("--week-of", type=date.fromisoformat, default=None)
    parser.add_argument("--export", action="store_true")
    args = parser.parse_args()

    log = setup_logging()
    configs = load_configs_for_run(args.config_dir)
    if not configs:
        log.error(f"No configs found in {args.config_dir}")
        sys.exit(1)

    all_summaries = {}
    for cfg in configs:
        week_start = start_of_week(args.week_of or cfg.week_of or date.today())
        log.info(f">>> {cfg.name}: {week_range_label(week_start)}")
        events = generate_week(week_start, cfg.generation, seed=cfg.seed)
        all_summaries[cfg.name] = summarize_week(events)

        if args.export:
            name = f"{cfg.name}_{week_start.isoformat()}"
            result = save_week(
                cfg.output.output_dir, events, cfg.output.formats,
                name=name, calendar=cfg.output.calendar_name,
            )
            log.info(f"    {result.message}")

    print(format_summary_table(all_summaries))


if __name__ == "__main__":
    main()
