#!/usr/bin/env python3
"""Generate one realistic week for a profession, print it, and export it."""

import argparse
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from realistic_calendar.config import load_config
from realistic_calendar.data.export import save_week
from realistic_calendar.data.generators import generate_week
from realistic_calendar.data.professions import Profession
from realistic_calendar.data.weeks import start_of_week, week_range_label
from realistic_calendar.evaluation.metrics import summarize_week
from realistic_calendar.evaluation.tables import format_summary_table, format_week_table
from realistic_calendar.utils import setup_logging


def main():
    parser = argparse.ArgumentParser(description="Generate a realistic weekly calendar")
    parser.add_argument("--config", type=str, default="configs/base.yaml")
    parser.add_argument("--profession", type=str, default=None,
                        choices=[p.value for p in Profession])
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--week-of", type=date.fromisoformat, default=None,
                        help="Any date inside the wanted week (YYYY-MM-DD)")
    parser.add_argument("--output-dir", type=str, default=None)
    parser.add_argument("--no-export", action="store_true")
    args = parser.parse_args()

    log = setup_logging()
    config_path = Path(args.config)
    base = config_path.parent / "base.yaml"
    cfg = load_config(config_path, base=base if base.exists() and base != config_path else None)
    gen_cfg = cfg.generation
    if args.profession:
        gen_cfg = gen_cfg.model_copy(update={"profession": Profession(args.profession)})
    seed = args.seed if args.seed is not None else cfg.seed
    week_start = start_of_week(args.week_of or cfg.week_of or date.today())

    log.info(
        f"Generating {gen_cfg.profession.display_name} week {week_range_label(week_start)} "
        f"(intensity={gen_cfg.work_intensity.value}, seed={seed})"
    )
    events = generate_week(week_start, gen_cfg, seed=seed)

    print(format_week_table(events))
    print()
    print(format_summary_table({cfg.name: summarize_week(events)}))

    if args.no_export:
        return

    output_dir = args.output_dir or cfg.output.output_dir
    name = f"{cfg.name}_{week_start.isoformat()}"
    result = save_week(
        output_dir, events, cfg.output.formats, name=name, calendar=cfg.output.calendar_name
    )
    log.info(result.message)
    for path in result.paths:
        log.info(f"  wrote {path}")


if __name__ == "__main__":
    main()
