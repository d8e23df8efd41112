from decimal import Decimal

import pytest

from crash_game.domain import (
    InsufficientBalanceError,
    InvalidPhaseError,
    InvalidWagerError,
    RoundEngine,
    Session,
)


def test_create_uses_defaults() -> None:
    session = Session.create()

    assert session.balance == 1000
    assert len(session.participants) == 5
    assert session.human is session.participants[0]
    assert session.human.name == "me"
    assert session.human_stake == 50
    assert session.human_cash_out_multiplier == 0


def test_default_stake_never_exceeds_balance() -> None:
    assert Session.create(starting_balance=Decimal(20)).human_stake == 20


def test_deduct_and_credit() -> None:
    session = Session.create(starting_balance=Decimal(100))

    session.deduct_stake(Decimal(40))
    session.credit_winnings(250)

    assert session.balance == 310


def test_deduct_more_than_balance_fails() -> None:
    session = Session.create(starting_balance=Decimal(100))

    with pytest.raises(InsufficientBalanceError):
        session.deduct_stake(Decimal("100.01"))

    assert session.balance == 100


def test_negative_amounts_rejected() -> None:
    session = Session.create()

    with pytest.raises(InvalidWagerError):
        session.deduct_stake(Decimal(-5))
    with pytest.raises(InvalidWagerError):
        session.credit_winnings(-5)


def test_stake_bounds_follow_balance() -> None:
    session = Session.create(starting_balance=Decimal(100))
    assert session.stake_bounds() == (0, 100)

    session.deduct_stake(Decimal(30))

    assert session.stake_bounds() == (0, 70)
    assert session.multiplier_bounds() == (0, 10)


def test_inputs_validated_against_bounds(session: Session) -> None:
    session.set_human_stake(Decimal(1000))
    session.set_human_cash_out_multiplier(Decimal("9.75"))
    session.set_human_stake(None)

    assert session.human_stake is None
    assert session.human_cash_out_multiplier == Decimal("9.75")

    with pytest.raises(InvalidWagerError):
        session.set_human_stake(Decimal(1001))
    with pytest.raises(InvalidWagerError):
        session.set_human_cash_out_multiplier(Decimal(11))


def test_inputs_locked_while_running(engine: RoundEngine) -> None:
    engine.start_round(50, 2)

    with pytest.raises(InvalidPhaseError):
        engine.session.set_human_stake(Decimal(10))
    with pytest.raises(InvalidPhaseError):
        engine.session.set_human_cash_out_multiplier(Decimal(3))

    engine.stop_round(1)
    engine.session.set_human_stake(Decimal(10))
    assert engine.session.human_stake == 10


def test_sessions_are_isolated(random_source) -> None:
    first = RoundEngine(Session.create(), random_source)
    second = RoundEngine(Session.create(), random_source)

    first.start_round(100, 2)

    assert second.balance == 1000
    assert second.participants[0].stake is None


def test_stored_stake_shrinks_with_balance() -> None:
    session = Session.create(starting_balance=Decimal(100))
    session.set_human_stake(Decimal(80))

    session.deduct_stake(Decimal(50))

    assert session.human_stake == 50
    low, high = session.stake_bounds()
    assert low <= session.human_stake <= high


def test_stored_stake_within_bounds_after_losing_everything(random_source) -> None:
    engine = RoundEngine(Session.create(starting_balance=Decimal(100)), random_source)

    engine.start_round(100, 5)
    engine.stop_round(1)

    assert engine.balance == 0
    assert engine.session.human_stake == 0

    engine.start_round(engine.session.human_stake, engine.session.human_cash_out_multiplier)
    assert engine.participants[0].stake == 0


def test_credit_keeps_unset_stake_unset() -> None:
    session = Session.create()
    session.set_human_stake(None)

    session.credit_winnings(10)

    assert session.human_stake is None
