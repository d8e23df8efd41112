from decimal import Decimal

from crash_game.domain import Participant, RoundEngine, RoundPhase
from crash_game.services.board_service import BoardService, display


def test_display_uses_placeholder_for_missing_values() -> None:
    assert display(None) == "-"
    assert display(Decimal("50")) == "50"
    assert display(Decimal("2.0")) == "2"
    assert display(Decimal("2.50")) == "2.50"
    assert display(0) == "0"


def test_current_round_before_start_shows_placeholders(engine: RoundEngine) -> None:
    rows = BoardService().current_round(engine.participants, engine.phase, engine.stop_point)

    assert [row.name for row in rows] == ["alice", "CPU 1", "CPU 2", "CPU 3", "CPU 4"]
    assert all(row.stake == "-" and row.cash_out_multiplier == "-" for row in rows)
    assert all(row.outcome is None for row in rows)


def test_current_round_outcomes_after_stop(engine: RoundEngine) -> None:
    engine.start_round(50, "2.5")
    engine.stop_round("2.5")

    rows = BoardService().current_round(engine.participants, engine.phase, engine.stop_point)

    assert rows[0].stake == "50"
    assert rows[0].cash_out_multiplier == "2.5"
    assert rows[0].outcome == "tie"
    assert rows[1].outcome == "tie"


def test_outcome_won_and_lost() -> None:
    participants = [
        Participant(id=1, name="a", stake=Decimal(1), cash_out_multiplier=Decimal(2)),
        Participant(id=2, name="b", stake=Decimal(1), cash_out_multiplier=Decimal(5)),
    ]

    rows = BoardService().current_round(participants, RoundPhase.STOPPED, Decimal(3))

    assert [row.outcome for row in rows] == ["won", "lost"]


def test_ranking_hides_names_until_stopped(engine: RoundEngine) -> None:
    engine.start_round(50, 2)
    board = BoardService()

    running = board.ranking(engine.participants, engine.phase)
    assert [row.name for row in running] == ["-"] * 5
    assert [row.score for row in running] == ["-"] * 5

    engine.stop_round(3)
    ranked = board.ranking(engine.participants, engine.phase)

    assert [row.rank for row in ranked] == [1, 2, 3, 4, 5]
    assert ranked[0].name in {"CPU 1", "CPU 2", "CPU 3", "CPU 4"}
    assert ranked[0].score == "128"
    assert ranked[-1].name == "alice"
    assert ranked[-1].score == "100"
