from .participant import (
    CrashGameError,
    InsufficientBalanceError,
    InvalidPhaseError,
    InvalidSpeedError,
    InvalidStopPointError,
    InvalidWagerError,
    Participant,
    build_roster,
    find_human,
    to_decimal,
)
from .random_source import RandomSource, SystemRandomSource
from .round import Round, RoundEngine, RoundPhase
from .session import Session
from .settlement import (
    SettlementResult,
    cashed_out,
    payout,
    rank_participants,
    settle,
)

__all__ = [
    "CrashGameError",
    "InsufficientBalanceError",
    "InvalidPhaseError",
    "InvalidSpeedError",
    "InvalidStopPointError",
    "InvalidWagerError",
    "Participant",
    "RandomSource",
    "Round",
    "RoundEngine",
    "RoundPhase",
    "Session",
    "SettlementResult",
    "SystemRandomSource",
    "build_roster",
    "cashed_out",
    "find_human",
    "payout",
    "rank_participants",
    "settle",
    "to_decimal",
]
