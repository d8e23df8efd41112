from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from typing import Iterable


class CrashGameError(ValueError):
    """Raised when a game rule is violated."""


class InvalidWagerError(CrashGameError):
    """Stake or cash-out multiplier outside the allowed bounds."""


class InsufficientBalanceError(InvalidWagerError):
    """Stake exceeds the points the player still has."""


class InvalidPhaseError(CrashGameError):
    """Operation is not allowed in the current round phase."""


class InvalidStopPointError(CrashGameError):
    pass


class InvalidSpeedError(CrashGameError):
    pass


HUMAN_PARTICIPANT_ID = 1
DEFAULT_HUMAN_NAME = "me"


@dataclass(frozen=True)
class Participant:
    id: int
    name: str
    stake: Decimal | None = None
    cash_out_multiplier: Decimal | None = None
    score: int | None = None
    is_human: bool = False

    def __post_init__(self) -> None:
        if (self.stake is None) != (self.cash_out_multiplier is None):
            raise CrashGameError("stake and cash_out_multiplier must be set together")
        if self.stake is not None and self.stake < 0:
            raise InvalidWagerError("stake must be non-negative")
        if self.score is not None and self.score < 0:
            raise CrashGameError("score must be non-negative")

    @property
    def is_configured(self) -> bool:
        return self.stake is not None

    def with_wager(self, stake: Decimal, cash_out_multiplier: Decimal) -> Participant:
        return replace(self, stake=stake, cash_out_multiplier=cash_out_multiplier, score=None)

    def cleared(self) -> Participant:
        return replace(self, stake=None, cash_out_multiplier=None, score=None)


def to_decimal(value: object, *, field: str) -> Decimal:
    """Convert an incoming number to Decimal without binary float noise."""
    if isinstance(value, bool):
        raise InvalidWagerError(f"{field} must be a number")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value))
        except InvalidOperation as exc:
            raise InvalidWagerError(f"{field} must be a number") from exc
    else:
        raise InvalidWagerError(f"{field} must be a number")
    if not result.is_finite():
        raise InvalidWagerError(f"{field} must be finite")
    return result


def build_roster(human_name: str, synthetic_count: int) -> list[Participant]:
    name = human_name.strip() or DEFAULT_HUMAN_NAME
    if synthetic_count < 0:
        raise CrashGameError("synthetic_count must be non-negative")

    roster = [Participant(id=HUMAN_PARTICIPANT_ID, name=name, is_human=True)]
    for idx in range(1, synthetic_count + 1):
        roster.append(Participant(id=HUMAN_PARTICIPANT_ID + idx, name=f"CPU {idx}"))
    return roster


def find_human(participants: Iterable[Participant]) -> Participant | None:
    for participant in participants:
        if participant.is_human:
            return participant
    return None
