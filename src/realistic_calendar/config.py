"""Pydantic config models + YAML loading."""

from __future__ import annotations

from datetime import date
from enum import Enum
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

from .data.professions import Profession


class WorkIntensity(str, Enum):
    LIGHT = "light"
    MODERATE = "moderate"
    INTENSE = "intense"

    @property
    def multiplier(self) -> float:
        return INTENSITY_MULTIPLIERS[self]


INTENSITY_MULTIPLIERS = {
    WorkIntensity.LIGHT: 0.7,
    WorkIntensity.MODERATE: 1.0,
    WorkIntensity.INTENSE: 1.3,
}


class GenerationConfig(BaseModel):
    """Options for one week of generation. Frozen: a run never mutates it."""

    model_config = ConfigDict(frozen=True)

    profession: Profession = Profession.LAWYER
    include_gym: bool = True
    gym_frequency: int = Field(default=3, ge=1, le=7)  # sessions per week
    include_family_time: bool = True
    include_weekend_work: bool = False
    include_after_hours: bool = False
    work_intensity: WorkIntensity = WorkIntensity.MODERATE

    @classmethod
    def default(cls, profession: Profession) -> "GenerationConfig":
        return cls(profession=profession)

    @property
    def intensity_multiplier(self) -> float:
        return self.work_intensity.multiplier


class OutputConfig(BaseModel):
    output_dir: str = "calendars"
    formats: list[str] = ["json", "ics"]
    calendar_name: Optional[str] = None  # None = the store default calendar


class RunConfig(BaseModel):
    name: str = "base"
    seed: Optional[int] = 42
    week_of: Optional[date] = None  # any day inside the wanted week; None = today
    generation: GenerationConfig = GenerationConfig()
    output: OutputConfig = OutputConfig()


def _read_yaml(path: str | Path) -> dict:
    with open(path) as f:
        return yaml.safe_load(f) or {}


def _deep_merge(base: dict, override: dict) -> dict:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: str | Path, base: str | Path | None = None) -> RunConfig:
    """Load config from YAML.

    Keys missing from the file come from ``base`` (another YAML file, merged
    section by section) when given, then from the model defaults.
    """
    raw = _read_yaml(path)
    if base is not None:
        raw = _deep_merge(_read_yaml(base), raw)
    return RunConfig(**raw)


def load_configs_for_run(config_dir: str | Path = "configs") -> list[RunConfig]:
    """Load all YAML configs from a directory, each layered over ``base.yaml`` if present."""
    config_dir = Path(config_dir)
    base = config_dir / "base.yaml"
    configs = []
    for p in sorted(config_dir.glob("*.yaml")):
        if p.name == "base.yaml":
            continue
        configs.append(load_config(p, base=base if base.exists() else None))
    return configs
