from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from itertools import count
from typing import Callable

from crash_game.config import Settings
from crash_game.domain import (
    CrashGameError,
    RandomSource,
    RoundEngine,
    Session,
    SettlementResult,
    SystemRandomSource,
)
from crash_game.services import input_clamp

logger = logging.getLogger(__name__)


class SessionNotFound(CrashGameError):
    def __init__(self, session_id: int) -> None:
        self.session_id = session_id
        super().__init__(f"session {session_id} not found")


@dataclass
class SessionHandle:
    session_id: int
    session: Session
    engine: RoundEngine


class CrashGameService:
    """In-memory registry of isolated sessions, one round engine each."""

    def __init__(
        self,
        settings: Settings,
        random_source_factory: Callable[[], RandomSource] = SystemRandomSource,
    ) -> None:
        self.settings = settings
        self.random_source_factory = random_source_factory
        self._ids = count(1)
        self._sessions: dict[int, SessionHandle] = {}

    def create_session(
        self,
        player_name: str | None = None,
        starting_balance: Decimal | None = None,
        synthetic_players: int | None = None,
    ) -> SessionHandle:
        session = Session.create(
            starting_balance=(
                self.settings.starting_balance if starting_balance is None else starting_balance
            ),
            player_name=player_name if player_name is not None else self.settings.human_name,
            synthetic_players=(
                self.settings.synthetic_players if synthetic_players is None else synthetic_players
            ),
            max_multiplier=self.settings.max_multiplier,
        )
        handle = SessionHandle(
            session_id=next(self._ids),
            session=session,
            engine=RoundEngine(session, self.random_source_factory()),
        )
        self._sessions[handle.session_id] = handle
        logger.info(
            "Created session %s for %r with balance %s",
            handle.session_id,
            session.player_name,
            session.balance,
        )
        return handle

    def get(self, session_id: int) -> SessionHandle:
        handle = self._sessions.get(session_id)
        if handle is None:
            raise SessionNotFound(session_id)
        return handle

    def update_inputs(self, session_id: int, changes: dict[str, object]) -> SessionHandle:
        handle = self.get(session_id)
        session = handle.session
        if "stake" in changes:
            low, high = session.stake_bounds()
            session.set_human_stake(input_clamp.clamp_input(changes["stake"], session.human_stake, low, high))
        if "cash_out_multiplier" in changes:
            low, high = session.multiplier_bounds()
            session.set_human_cash_out_multiplier(
                input_clamp.clamp_input(
                    changes["cash_out_multiplier"], session.human_cash_out_multiplier, low, high
                )
            )
        return handle

    def start_round(
        self,
        session_id: int,
        stake: object | None = None,
        cash_out_multiplier: object | None = None,
    ) -> SessionHandle:
        handle = self.get(session_id)
        session = handle.session
        handle.engine.start_round(
            session.human_stake if stake is None else stake,
            session.human_cash_out_multiplier if cash_out_multiplier is None else cash_out_multiplier,
        )
        return handle

    def stop_round(self, session_id: int, stop_point: object) -> SettlementResult:
        return self.get(session_id).engine.stop_round(stop_point)

    def reset_round(self, session_id: int) -> SessionHandle:
        handle = self.get(session_id)
        handle.engine.reset_round()
        return handle

    def set_speed(self, session_id: int, speed: object) -> SessionHandle:
        handle = self.get(session_id)
        handle.engine.set_speed(speed)
        return handle
