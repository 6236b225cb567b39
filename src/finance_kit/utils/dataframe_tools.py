from __future__ import annotations

# Helpers to move amount columns of a pandas DataFrame into Money values and back.

import logging
import math
from decimal import Decimal
from typing import Iterable, Optional

import pandas as pd

from finance_kit.domain.monetary.currency import Currency
from finance_kit.domain.monetary.money import Money


logger = logging.getLogger(__name__)


def money_from_frame(
    df: pd.DataFrame,
    amount_column: str,
    currency_column: Optional[str] = None,
    currency: Optional[Currency] = None,
) -> list[Money]:
    """Build one Money per row of $df.

    Cell values are read as follows:
    - Decimal and int: exact.
    - float (incl. numpy floats): float path, 17 significant digits.
    - str: `Money.from_string`.

    Args:
        df: Source data.
        amount_column: Column holding the amounts.
        currency_column: Optional column holding currency codes (looked up in the Currency registry).
            Empty / NaN cells give a unit-less Money.
        currency: Fixed currency for every row. Cannot be combined with $currency_column.

    Returns:
        list[Money]: Values in row order.

    Raises:
        ValueError: If a column is missing, both currency arguments are given, a cell
            cannot be read as an amount, or a currency code is unknown.
    """
    # Check: $df must be a pandas DataFrame
    if not isinstance(df, pd.DataFrame):
        raise ValueError(f"Cannot call `money_from_frame` because $df is not a pandas DataFrame (got type '{type(df).__name__}')")

    # Raise: one source of currency only
    if currency_column is not None and currency is not None:
        raise ValueError("Cannot call `money_from_frame` with both $currency_column and $currency")

    missing = [c for c in (amount_column, currency_column) if c is not None and c not in df.columns]
    if missing:
        raise ValueError(f"Cannot call `money_from_frame` because the DataFrame is missing columns: {', '.join(missing)}")

    # `tolist` yields Python scalars (int, float, str) instead of numpy ones
    amounts = df[amount_column].tolist()
    codes = df[currency_column].tolist() if currency_column is not None else [None] * len(amounts)

    result: list[Money] = []
    for row_number, (index, value, code) in enumerate(zip(df.index, amounts, codes)):
        row_currency = currency
        if currency_column is not None:
            row_currency = _currency_from_cell(code, index)

        money = _money_from_cell(value, row_currency)
        # Raise: report the offending row instead of silently skipping it
        if money is None:
            raise ValueError(f"Cannot read row {index} (position {row_number}) of column '{amount_column}' as an amount: {value!r}")
        result.append(money)

    logger.debug(f"Read {len(result)} Money value(s) from column '{amount_column}'")
    return result


def sum_money(values: Iterable[Money]) -> Money:
    """Sum $values on raw values; the result is unit-less (empty input gives zero)."""
    return sum(values, Money(0))


def amounts_to_series(values: Iterable[Money], name: str = "amount") -> pd.Series:
    """Rounded amounts of $values as an object-dtype Series of Decimals."""
    return pd.Series([money.amount for money in values], name=name, dtype=object)


def _money_from_cell(value: object, currency: Optional[Currency]) -> Optional[Money]:
    if isinstance(value, str):
        return Money.from_string(value.strip(), currency)
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal) and not value.is_finite():
        return None
    if isinstance(value, (Decimal, int)):
        return Money(value, currency)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return Money.from_float(number, currency)


def _currency_from_cell(value: object, index: object) -> Optional[Currency]:
    if value is None or (not isinstance(value, str) and pd.isna(value)) or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return Currency.from_str(str(value))
    except ValueError as e:
        raise ValueError(f"Cannot read row {index} currency code {value!r}: {e}") from e
