from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from .participant import (
    InsufficientBalanceError,
    InvalidPhaseError,
    InvalidWagerError,
    Participant,
    build_roster,
    find_human,
)
from .round import Round, RoundPhase

logger = logging.getLogger(__name__)

DEFAULT_STARTING_BALANCE = Decimal(1000)
DEFAULT_SYNTHETIC_PLAYERS = 4
DEFAULT_HUMAN_STAKE = Decimal(50)
MAX_CASH_OUT_MULTIPLIER = Decimal(10)


@dataclass
class Session:
    """Aggregate owning one player's balance, round and roster."""

    balance: Decimal
    participants: list[Participant]
    round: Round = field(default_factory=Round)
    player_name: str = ""
    human_stake: Decimal | None = None
    human_cash_out_multiplier: Decimal | None = None
    max_multiplier: Decimal = MAX_CASH_OUT_MULTIPLIER

    @classmethod
    def create(
        cls,
        *,
        starting_balance: Decimal = DEFAULT_STARTING_BALANCE,
        player_name: str = "",
        synthetic_players: int = DEFAULT_SYNTHETIC_PLAYERS,
        max_multiplier: Decimal = MAX_CASH_OUT_MULTIPLIER,
    ) -> Session:
        if starting_balance < 0:
            raise InvalidWagerError("starting balance must be non-negative")
        return cls(
            balance=starting_balance,
            participants=build_roster(player_name, synthetic_players),
            player_name=player_name.strip(),
            human_stake=min(DEFAULT_HUMAN_STAKE, starting_balance),
            human_cash_out_multiplier=Decimal(0),
            max_multiplier=max_multiplier,
        )

    @property
    def human(self) -> Participant | None:
        return find_human(self.participants)

    def deduct_stake(self, amount: Decimal) -> None:
        if amount < 0:
            raise InvalidWagerError("stake must be non-negative")
        if amount > self.balance:
            raise InsufficientBalanceError(f"stake {amount} exceeds balance {self.balance}")
        self.balance -= amount
        self._clamp_stake_input()

    def credit_winnings(self, amount: Decimal | int) -> None:
        if amount < 0:
            raise InvalidWagerError("winnings must be non-negative")
        self.balance += amount
        self._clamp_stake_input()

    def stake_bounds(self) -> tuple[Decimal, Decimal]:
        return Decimal(0), self.balance

    def multiplier_bounds(self) -> tuple[Decimal, Decimal]:
        return Decimal(0), self.max_multiplier

    def set_human_stake(self, value: Decimal | None) -> None:
        self._ensure_inputs_editable()
        if value is not None:
            low, high = self.stake_bounds()
            if not low <= value <= high:
                raise InvalidWagerError(f"stake must be within [{low}, {high}]")
        self.human_stake = value

    def set_human_cash_out_multiplier(self, value: Decimal | None) -> None:
        self._ensure_inputs_editable()
        if value is not None:
            low, high = self.multiplier_bounds()
            if not low <= value <= high:
                raise InvalidWagerError(f"cash_out_multiplier must be within [{low}, {high}]")
        self.human_cash_out_multiplier = value

    def _clamp_stake_input(self) -> None:
        if self.human_stake is not None and self.human_stake > self.balance:
            self.human_stake = self.balance

    def _ensure_inputs_editable(self) -> None:
        if self.round.phase is RoundPhase.RUNNING:
            logger.warning("Rejected wager input change while round %s is running", self.round.number)
            raise InvalidPhaseError("wager inputs are locked while the round is running")
