"""Validation helpers for the stake and multiplier input widgets.

Out-of-range numbers are clamped rather than rejected, text that is not a
number is ignored (the previous value stays), and an empty field means
"unset".
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

TWO_PLACES = Decimal("0.01")
STAKE_STEP = Decimal(1)
MULTIPLIER_STEP = Decimal("0.25")


def parse_input(raw: object) -> Decimal | None:
    """Return the numeric value of a raw input, or None if it is not a number."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, Decimal):
        value = raw
    elif isinstance(raw, (int, float)):
        value = Decimal(str(raw))
    elif isinstance(raw, str):
        try:
            value = Decimal(raw.strip())
        except InvalidOperation:
            return None
    else:
        return None
    return value if value.is_finite() else None


def clamp_input(raw: object, previous: Decimal | None, low: Decimal, high: Decimal) -> Decimal | None:
    if raw is None or (isinstance(raw, str) and raw.strip() == ""):
        return None

    value = parse_input(raw)
    if value is None:
        return previous

    value = min(max(value, low), high)
    try:
        return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # too many digits to hold two decimal places
        return value


def step_value(value: Decimal | None, step: Decimal, low: Decimal, high: Decimal) -> Decimal:
    """Apply an increase/decrease button press; a step out of range is a no-op."""
    current = value if value is not None else low
    moved = current + step
    if step > 0 and current >= high:
        return current
    if step < 0 and current <= low:
        return current
    return min(max(moved, low), high)


def increase_stake(value: Decimal | None, balance: Decimal) -> Decimal:
    return step_value(value, STAKE_STEP, Decimal(0), balance)


def decrease_stake(value: Decimal | None, balance: Decimal) -> Decimal:
    return step_value(value, -STAKE_STEP, Decimal(0), balance)


def increase_multiplier(value: Decimal | None, max_multiplier: Decimal) -> Decimal:
    return step_value(value, MULTIPLIER_STEP, Decimal(0), max_multiplier)


def decrease_multiplier(value: Decimal | None, max_multiplier: Decimal) -> Decimal:
    return step_value(value, -MULTIPLIER_STEP, Decimal(0), max_multiplier)
