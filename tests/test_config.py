from decimal import Decimal

import pytest

from crash_game.config import Settings, load_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "CRASH_GAME_STARTING_BALANCE",
        "CRASH_GAME_SYNTHETIC_PLAYERS",
        "CRASH_GAME_MAX_MULTIPLIER",
        "CRASH_GAME_HUMAN_NAME",
        "CRASH_GAME_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    assert load_settings() == Settings()


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CRASH_GAME_STARTING_BALANCE", "250.5")
    monkeypatch.setenv("CRASH_GAME_SYNTHETIC_PLAYERS", "2")
    monkeypatch.setenv("CRASH_GAME_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.starting_balance == Decimal("250.5")
    assert settings.synthetic_players == 2
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "name, value",
    [
        ("CRASH_GAME_STARTING_BALANCE", "lots"),
        ("CRASH_GAME_STARTING_BALANCE", "-1"),
        ("CRASH_GAME_SYNTHETIC_PLAYERS", "two"),
        ("CRASH_GAME_MAX_MULTIPLIER", "0"),
        ("CRASH_GAME_LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_values_fail_fast(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError):
        load_settings()
