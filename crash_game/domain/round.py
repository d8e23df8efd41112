from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

from .participant import (
    InvalidPhaseError,
    InvalidSpeedError,
    InvalidStopPointError,
    InvalidWagerError,
    InsufficientBalanceError,
    Participant,
    to_decimal,
)
from .random_source import (
    RandomSource,
    SystemRandomSource,
    draw_synthetic_multiplier,
    draw_synthetic_stake,
)
from .settlement import SettlementResult, settle

if TYPE_CHECKING:
    from .session import Session

logger = logging.getLogger(__name__)


class RoundPhase(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


@dataclass(frozen=True)
class Round:
    phase: RoundPhase = RoundPhase.IDLE
    stop_point: Decimal | None = None
    speed: Decimal = Decimal(1)
    number: int = 0

    def __post_init__(self) -> None:
        if self.speed <= 0:
            raise InvalidSpeedError("speed must be positive")
        if (self.stop_point is None) != (self.phase is not RoundPhase.STOPPED):
            raise InvalidPhaseError("stop_point is set exactly when the round is stopped")


class RoundEngine:
    """Drives the idle -> running -> stopped lifecycle of a session's rounds.

    The engine never measures time: a driver decides when to call
    ``stop_round`` and with which stop point.
    """

    def __init__(self, session: Session, random_source: RandomSource | None = None) -> None:
        self.session = session
        self.random_source = random_source or SystemRandomSource()

    @property
    def phase(self) -> RoundPhase:
        return self.session.round.phase

    @property
    def participants(self) -> list[Participant]:
        return list(self.session.participants)

    @property
    def stop_point(self) -> Decimal | None:
        return self.session.round.stop_point

    @property
    def balance(self) -> Decimal:
        return self.session.balance

    def start_round(self, stake: object, cash_out_multiplier: object) -> None:
        if self.phase is RoundPhase.RUNNING:
            logger.warning("Rejected start: round %s is already running", self.session.round.number)
            raise InvalidPhaseError("round is already running")

        stake_value, multiplier_value = self._validate_wager(stake, cash_out_multiplier)

        if self.phase is RoundPhase.STOPPED:
            self.reset_round()

        session = self.session
        session.human_stake = stake_value
        session.human_cash_out_multiplier = multiplier_value
        session.deduct_stake(stake_value)
        session.participants = [self._configure(p, stake_value, multiplier_value) for p in session.participants]
        session.round = replace(
            session.round,
            phase=RoundPhase.RUNNING,
            stop_point=None,
            number=session.round.number + 1,
        )
        logger.info(
            "Round %s started: stake=%s cash_out=%s balance=%s",
            session.round.number,
            stake_value,
            multiplier_value,
            session.balance,
        )

    def stop_round(self, stop_point: object) -> SettlementResult:
        if self.phase is not RoundPhase.RUNNING:
            logger.warning("Rejected stop: round is %s", self.phase.value)
            raise InvalidPhaseError(f"cannot stop a round that is {self.phase.value}")

        try:
            value = to_decimal(stop_point, field="stop_point")
        except InvalidWagerError as exc:
            raise InvalidStopPointError(str(exc)) from exc
        if value < 0:
            raise InvalidStopPointError("stop_point must be non-negative")

        session = self.session
        result = settle(session.participants, value)
        session.participants = list(result.participants)
        session.round = replace(session.round, phase=RoundPhase.STOPPED, stop_point=value)
        if result.human_payout:
            session.credit_winnings(result.human_payout)

        logger.info(
            "Round %s stopped at %s: human_payout=%s house_delta=%s balance=%s",
            session.round.number,
            value,
            result.human_payout,
            result.house_delta,
            session.balance,
        )
        return result

    def reset_round(self) -> None:
        session = self.session
        if self.phase is RoundPhase.RUNNING:
            logger.info("Round %s cancelled; escrowed stake is forfeited", session.round.number)
        session.participants = [p.cleared() for p in session.participants]
        session.round = replace(session.round, phase=RoundPhase.IDLE, stop_point=None)

    def set_speed(self, speed: object) -> None:
        if self.phase is RoundPhase.RUNNING:
            raise InvalidPhaseError("speed is locked while the round is running")
        try:
            value = to_decimal(speed, field="speed")
        except InvalidWagerError as exc:
            raise InvalidSpeedError(str(exc)) from exc
        if value <= 0:
            raise InvalidSpeedError("speed must be positive")
        self.session.round = replace(self.session.round, speed=value)

    def _validate_wager(self, stake: object, cash_out_multiplier: object) -> tuple[Decimal, Decimal]:
        stake_value = to_decimal(stake, field="stake")
        multiplier_value = to_decimal(cash_out_multiplier, field="cash_out_multiplier")

        if stake_value < 0:
            raise InvalidWagerError("stake must be non-negative")
        if stake_value > self.session.balance:
            logger.warning("Rejected stake %s above balance %s", stake_value, self.session.balance)
            raise InsufficientBalanceError(f"stake {stake_value} exceeds balance {self.session.balance}")

        low, high = self.session.multiplier_bounds()
        if not low <= multiplier_value <= high:
            raise InvalidWagerError(f"cash_out_multiplier must be within [{low}, {high}]")
        return stake_value, multiplier_value

    def _configure(self, participant: Participant, stake: Decimal, cash_out_multiplier: Decimal) -> Participant:
        if participant.is_human:
            return participant.with_wager(stake, cash_out_multiplier)
        return participant.with_wager(
            draw_synthetic_stake(self.random_source),
            draw_synthetic_multiplier(self.random_source, self.session.max_multiplier),
        )
