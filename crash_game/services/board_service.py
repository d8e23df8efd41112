from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

from crash_game.domain import Participant, RoundPhase, cashed_out, rank_participants

PLACEHOLDER = "-"


@dataclass
class CurrentRoundRow:
    id: int
    name: str
    stake: str
    cash_out_multiplier: str
    outcome: str | None


@dataclass
class RankingRow:
    rank: int
    name: str
    score: str


def display(value: object) -> str:
    if value is None:
        return PLACEHOLDER
    if isinstance(value, Decimal):
        return format(value.normalize(), "f") if value == value.to_integral_value() else str(value)
    return str(value)


def outcome_for(participant: Participant, phase: RoundPhase, stop_point: Decimal | None) -> str | None:
    if phase is not RoundPhase.STOPPED or stop_point is None or participant.cash_out_multiplier is None:
        return None
    if cashed_out(stop_point, participant.cash_out_multiplier):
        return "won"
    if stop_point == participant.cash_out_multiplier:
        return "tie"
    return "lost"


class BoardService:
    """Read-only projections of a session for the two display tables."""

    def current_round(
        self,
        participants: Sequence[Participant],
        phase: RoundPhase,
        stop_point: Decimal | None,
    ) -> list[CurrentRoundRow]:
        return [
            CurrentRoundRow(
                id=participant.id,
                name=participant.name,
                stake=display(participant.stake),
                cash_out_multiplier=display(participant.cash_out_multiplier),
                outcome=outcome_for(participant, phase, stop_point),
            )
            for participant in participants
        ]

    def ranking(self, participants: Sequence[Participant], phase: RoundPhase) -> list[RankingRow]:
        # names stay hidden until the round has been stopped
        reveal = phase is RoundPhase.STOPPED
        return [
            RankingRow(
                rank=idx,
                name=participant.name if reveal else PLACEHOLDER,
                score=display(participant.score),
            )
            for idx, participant in enumerate(rank_participants(participants), start=1)
        ]
