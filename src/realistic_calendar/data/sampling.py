"""Random-source helpers: weighted choice, Bernoulli draws, minute ranges."""

from __future__ import annotations

import random
from typing import Optional, Sequence, TypeVar, Union

T = TypeVar("T")


def make_rng(source: Union[int, random.Random, None] = None) -> random.Random:
    """Return an explicit random source.

    A ``random.Random`` is passed through untouched so callers can share one
    generator across several calls; an int seeds a fresh one; ``None`` seeds
    from system entropy.
    """
    if isinstance(source, random.Random):
        return source
    return random.Random(source)


def weighted_choice(
    outcomes: Sequence[tuple[T, float]],
    rng: random.Random,
    default: Optional[T] = None,
) -> Optional[T]:
    """Inverse-CDF sample from ``(value, weight)`` pairs whose weights sum to 1.

    One uniform draw in [0, 1) is compared against the running sum; the first
    outcome whose cumulative weight reaches the draw wins. ``default`` is
    returned when rounding leaves the draw above the final cumulative sum.
    """
    draw = rng.random()
    cumulative = 0.0
    for value, weight in outcomes:
        cumulative += weight
        if draw <= cumulative:
            return value
    return default


def bernoulli(p: float, rng: random.Random) -> bool:
    return rng.random() < p


def uniform_minutes(lo: int, hi: int, rng: random.Random) -> int:
    """Whole minutes drawn uniformly from [lo, hi]."""
    return rng.randint(lo, hi)
