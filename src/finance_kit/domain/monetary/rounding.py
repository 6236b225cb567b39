from __future__ import annotations

# Rounding policy shared by every Money amount: banker's rounding to 2 fractional digits.
# All arithmetic runs in MONEY_CONTEXT, so the thread-local decimal context is never read or changed.

from decimal import (
    Context,
    Decimal,
    DecimalException,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    ROUND_HALF_EVEN,
    Underflow,
)

from finance_kit.domain.monetary.errors import MoneyArithmeticError


AMOUNT_SCALE = 2
AMOUNT_QUANTUM = Decimal(1).scaleb(-AMOUNT_SCALE)
MONEY_PRECISION = 38

# Inexact and Rounded are deliberately not trapped: every rounding to scale 2 signals them.
MONEY_CONTEXT = Context(
    prec=MONEY_PRECISION,
    rounding=ROUND_HALF_EVEN,
    traps=[InvalidOperation, Overflow, Underflow, DivisionByZero],
)


def round_amount(raw_value: Decimal) -> Decimal:
    """Round $raw_value to the Money amount (scale 2, half-to-even).

    Args:
        raw_value: Unrounded decimal value.

    Returns:
        Decimal with exactly 2 fractional digits. A zero result is always unsigned,
        so `-0.004` rounds to `0.00`, not `-0.00`.

    Raises:
        MoneyArithmeticError: If rounding would overflow, underflow, divide by zero,
            or need more than `MONEY_PRECISION` significant digits, or $raw_value is not finite.
    """
    # Raise: quiet NaN passes through quantize without a signal
    if raw_value.is_nan():
        raise MoneyArithmeticError(f"Cannot round $raw_value ({raw_value}) because it is not a number")

    try:
        rounded = raw_value.quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_EVEN, context=MONEY_CONTEXT)
    except DecimalException as e:
        raise MoneyArithmeticError(f"Cannot round $raw_value ({raw_value}) to {AMOUNT_SCALE} fractional digits: {type(e).__name__}") from e

    # Small negatives round to -0.00; drop the sign so str() and encoded floats read 0
    if rounded.is_zero():
        return rounded.copy_abs()
    return rounded
