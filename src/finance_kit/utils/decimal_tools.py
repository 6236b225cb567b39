from __future__ import annotations

import math
from decimal import Decimal
from typing import TypeAlias


# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Number of significant decimal digits needed to tell any two binary doubles apart
FLOAT_SIGNIFICANT_DIGITS = 17


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def float_to_decimal(value: float) -> Decimal:
    """Converts a binary float to `Decimal`, keeping every digit the float can represent.

    Unlike `as_decimal`, which uses the shortest round-tripping repr, this keeps
    17 significant digits. So `12.345` becomes `12.345000000000001`, which is
    the value the double actually holds. Precision beyond that is lost at this
    boundary and nowhere else.

    Args:
        value: Finite float (ints are accepted and converted exactly).

    Returns:
        Value converted to `Decimal`.

    Raises:
        ValueError: If $value is NaN or infinite.
    """
    if isinstance(value, int):
        return Decimal(value)

    # Raise: NaN and infinities have no decimal amount
    if not math.isfinite(value):
        raise ValueError(f"Cannot call `float_to_decimal` because $value ({value}) is not finite")

    return Decimal(f"{value:.{FLOAT_SIGNIFICANT_DIGITS}g}")


def decimal_to_float(value: Decimal) -> float:
    """Converts `Decimal` to the nearest binary float."""
    return float(value)
