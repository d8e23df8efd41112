from __future__ import annotations

from decimal import Decimal
from itertools import cycle
from typing import Iterable

import pytest

from crash_game.domain import RoundEngine, Session


class ScriptedRandomSource:
    """Replays fractions of the requested range instead of drawing."""

    def __init__(self, fractions: Iterable[float]) -> None:
        self._fractions = cycle(list(fractions))
        self.calls: list[tuple[float, float]] = []

    def draw_uniform(self, low: float, high: float) -> float:
        self.calls.append((low, high))
        return low + next(self._fractions) * (high - low)


@pytest.fixture
def random_source() -> ScriptedRandomSource:
    # stake fraction 0.5 -> 51 points, multiplier fraction 0.25 -> 2.50
    return ScriptedRandomSource([0.5, 0.25])


@pytest.fixture
def session() -> Session:
    return Session.create(starting_balance=Decimal(1000), player_name="alice", synthetic_players=4)


@pytest.fixture
def engine(session: Session, random_source: ScriptedRandomSource) -> RoundEngine:
    return RoundEngine(session, random_source)


@pytest.fixture
def scripted_random_source() -> type[ScriptedRandomSource]:
    return ScriptedRandomSource
