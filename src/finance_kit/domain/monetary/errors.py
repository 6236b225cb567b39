from __future__ import annotations

from typing import Sequence


class MoneyArithmeticError(ArithmeticError):
    """Rounding a Money amount hit a condition the rounding policy refuses to absorb.

    Raised for overflow, underflow, division by zero and invalid operations
    (e.g. a result needing more significant digits than the money context holds).
    The original `decimal` signal is chained as `__cause__`.
    """


class MoneyDecodeError(ValueError):
    """Serialized input could not be decoded as a Money amount.

    Attributes:
        path (tuple[str | int, ...]): Keys/indices leading to the offending value
            (empty when the value itself is the document root).
        message (str): Human-readable reason.
    """

    def __init__(self, path: Sequence[str | int], message: str) -> None:
        self.path = tuple(path)
        self.message = message
        super().__init__(f"{message} at {format_path(self.path)}")


def format_path(path: Sequence[str | int]) -> str:
    """Render a decode path like `$.prices[2].amount`."""
    result = "$"
    for key in path:
        if isinstance(key, int):
            result += f"[{key}]"
        else:
            result += f".{key}"
    return result
