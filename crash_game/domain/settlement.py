"""Domain logic for settling a crash round into participant scores."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from decimal import Decimal, ROUND_HALF_UP

from .participant import InvalidStopPointError, Participant


@dataclass(frozen=True)
class SettlementResult:
    participants: tuple[Participant, ...]
    stop_point: Decimal
    human_payout: int
    total_staked: Decimal
    total_paid: int

    @property
    def house_delta(self) -> Decimal:
        return self.total_staked - self.total_paid

    @property
    def scores(self) -> dict[int, int]:
        return {participant.id: participant.score or 0 for participant in self.participants}


def cashed_out(stop_point: Decimal, cash_out_multiplier: Decimal | None) -> bool:
    """A participant wins only if the round ran strictly past their target."""
    if cash_out_multiplier is None:
        return False
    return stop_point > cash_out_multiplier


def payout(stake: Decimal, cash_out_multiplier: Decimal) -> int:
    return int((stake * cash_out_multiplier).to_integral_value(rounding=ROUND_HALF_UP))


def score_for(participant: Participant, stop_point: Decimal) -> int:
    if participant.stake is None or participant.cash_out_multiplier is None:
        return 0
    if not cashed_out(stop_point, participant.cash_out_multiplier):
        return 0
    return payout(participant.stake, participant.cash_out_multiplier)


def settle(participants: Sequence[Participant], stop_point: Decimal) -> SettlementResult:
    if stop_point < 0:
        raise InvalidStopPointError("stop_point must be non-negative")

    settled = tuple(replace(p, score=score_for(p, stop_point)) for p in participants)

    human_payout = 0
    for participant in settled:
        if participant.is_human:
            human_payout = participant.score or 0

    return SettlementResult(
        participants=settled,
        stop_point=stop_point,
        human_payout=human_payout,
        total_staked=sum((p.stake for p in settled if p.stake is not None), Decimal(0)),
        total_paid=sum(p.score or 0 for p in settled),
    )


def rank_participants(participants: Sequence[Participant]) -> list[Participant]:
    """Order by score descending; unsettled participants (score None) come first."""
    return sorted(
        participants,
        key=lambda p: (p.score is not None, -(p.score or 0)),
    )
