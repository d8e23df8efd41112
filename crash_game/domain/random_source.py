from __future__ import annotations

import random
from decimal import Decimal, ROUND_HALF_UP
from typing import Protocol

MIN_SYNTHETIC_STAKE = 1
MAX_SYNTHETIC_STAKE = 100
TWO_PLACES = Decimal("0.01")


class RandomSource(Protocol):
    def draw_uniform(self, low: float, high: float) -> float:
        """Return a float drawn uniformly from [low, high]."""
        ...


class SystemRandomSource:
    """Unseeded by default, matching casual play; pass a seed for replays."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def draw_uniform(self, low: float, high: float) -> float:
        return self._rng.uniform(low, high)


def draw_synthetic_stake(source: RandomSource) -> Decimal:
    span = MAX_SYNTHETIC_STAKE - MIN_SYNTHETIC_STAKE + 1
    value = int(source.draw_uniform(0, span)) + MIN_SYNTHETIC_STAKE
    return Decimal(min(max(value, MIN_SYNTHETIC_STAKE), MAX_SYNTHETIC_STAKE))


def draw_synthetic_multiplier(source: RandomSource, max_multiplier: Decimal) -> Decimal:
    value = Decimal(str(source.draw_uniform(0, float(max_multiplier))))
    value = value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    return min(max(value, Decimal(0)), max_multiplier)
