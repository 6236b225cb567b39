from __future__ import annotations

# Money serializes to a single JSON number: the rounded amount. Currency is not part of the
# encoding, so a decoded Money is always unit-less.

import json
import math
from typing import Any, Sequence

from finance_kit.domain.monetary.errors import MoneyDecodeError
from finance_kit.domain.monetary.money import Money
from finance_kit.utils.decimal_tools import decimal_to_float


DECODE_FAILURE_MESSAGE = "Could not decode value for amount"


def encode_money(money: Money) -> float:
    """Encode $money as a float equal to its rounded amount."""
    return decimal_to_float(money.amount)


def decode_money(value: Any, path: Sequence[str | int] = ()) -> Money:
    """Decode a serialized scalar into unit-less Money.

    Only JSON numbers are accepted (int or float, not bool, not numeric strings).

    Args:
        value: Scalar read from the serialized document.
        path: Location of $value in the document, reported on failure.

    Returns:
        Money: Unit-less Money built through the float path.

    Raises:
        MoneyDecodeError: If $value is not a finite number.
    """
    # Raise: bool is an int subclass but not an amount
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MoneyDecodeError(path, f"{DECODE_FAILURE_MESSAGE} (got type '{type(value).__name__}')")

    try:
        number = float(value)
    except OverflowError as e:
        raise MoneyDecodeError(path, f"{DECODE_FAILURE_MESSAGE} (integer too large)") from e

    # Raise: NaN/Infinity are accepted by the json module but are not amounts
    if not math.isfinite(number):
        raise MoneyDecodeError(path, f"{DECODE_FAILURE_MESSAGE} (got {value})")

    return Money.from_float(number)


def decode_money_at(document: Any, path: Sequence[str | int]) -> Money:
    """Walk $path through a parsed JSON $document and decode the scalar found there.

    Examples:
        >>> decode_money_at({"prices": [1.5, 2.25]}, ["prices", 1]).amount
        Decimal('2.25')

    Raises:
        MoneyDecodeError: If a key/index along $path is missing or the value is not a number.
    """
    node = document
    for depth, key in enumerate(path):
        walked = tuple(path[: depth + 1])
        if isinstance(node, dict) and isinstance(key, str):
            if key not in node:
                raise MoneyDecodeError(walked, "Missing key while looking for amount")
            node = node[key]
        elif isinstance(node, list) and isinstance(key, int) and not isinstance(key, bool):
            if not -len(node) <= key < len(node):
                raise MoneyDecodeError(walked, "Missing index while looking for amount")
            node = node[key]
        else:
            raise MoneyDecodeError(walked, f"Cannot step into value of type '{type(node).__name__}' while looking for amount")

    return decode_money(node, path)


class MoneyJSONEncoder(json.JSONEncoder):
    """`json.JSONEncoder` that writes Money as its encoded scalar."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Money):
            return encode_money(o)
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    """`json.dumps` with Money support."""
    return json.dumps(obj, cls=MoneyJSONEncoder, **kwargs)


def loads_money(text: str, path: Sequence[str | int] = ()) -> Money:
    """Parse JSON $text and decode the Money at $path.

    Raises:
        MoneyDecodeError: If $text is not valid JSON or the value at $path is not a number.
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise MoneyDecodeError((), f"Invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e

    return decode_money_at(document, path)
