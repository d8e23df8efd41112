from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation


@dataclass(frozen=True)
class Settings:
    starting_balance: Decimal = Decimal(1000)
    synthetic_players: int = 4
    max_multiplier: Decimal = Decimal(10)
    human_name: str = "me"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.starting_balance < 0:
            raise ValueError("CRASH_GAME_STARTING_BALANCE must be non-negative")
        if self.synthetic_players < 0:
            raise ValueError("CRASH_GAME_SYNTHETIC_PLAYERS must be non-negative")
        if self.max_multiplier <= 0:
            raise ValueError("CRASH_GAME_MAX_MULTIPLIER must be positive")
        if logging.getLevelName(self.log_level) == f"Level {self.log_level}":
            raise ValueError(f"unknown log level: {self.log_level}")


def load_settings() -> Settings:
    return Settings(
        starting_balance=_decimal_env("CRASH_GAME_STARTING_BALANCE", "1000"),
        synthetic_players=_int_env("CRASH_GAME_SYNTHETIC_PLAYERS", "4"),
        max_multiplier=_decimal_env("CRASH_GAME_MAX_MULTIPLIER", "10"),
        human_name=os.getenv("CRASH_GAME_HUMAN_NAME", "me"),
        log_level=os.getenv("CRASH_GAME_LOG_LEVEL", "INFO").upper(),
    )


def _decimal_env(name: str, default: str) -> Decimal:
    raw = os.getenv(name, default)
    try:
        value = Decimal(raw)
    except InvalidOperation as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc
    if not value.is_finite():
        raise ValueError(f"{name} must be finite, got {raw!r}")
    return value


def _int_env(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
