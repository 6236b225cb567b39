from __future__ import annotations

import logging
from decimal import Context, Decimal, DecimalException, ROUND_HALF_EVEN
from typing import Optional

from finance_kit.formatting.money_locale import MoneyLocale


logger = logging.getLogger(__name__)

# Formatting never changes the value beyond the requested fraction digits; anything that would is reported as None
FORMAT_CONTEXT = Context(prec=60, rounding=ROUND_HALF_EVEN)


class NumberFormatter:
    """Render decimals with a locale's separators and a fixed number of fraction digits.

    Rounding to $fraction_digits uses half-to-even, matching Money amounts.
    """

    __slots__ = ("_locale", "_fraction_digits")

    def __init__(self, locale: Optional[MoneyLocale] = None, fraction_digits: int = 2) -> None:
        """
        Args:
            locale: Locale conventions; None uses the configured default locale.
            fraction_digits: Number of fractional digits to show (>= 0).

        Raises:
            ValueError: If $fraction_digits is negative.
        """
        # Raise: a negative digit count has no rendering
        if fraction_digits < 0:
            raise ValueError(f"Cannot call `NumberFormatter.__init__` because $fraction_digits ({fraction_digits}) < 0")

        if locale is None:
            # Imported here, config depends on the formatting package
            from finance_kit.config import get_settings

            locale = get_settings().default_locale

        self._locale = locale
        self._fraction_digits = fraction_digits

    @classmethod
    def monetary(cls, locale: Optional[MoneyLocale] = None) -> "NumberFormatter":
        """Formatter for plain monetary numbers: grouped, 2 fraction digits, no symbol."""
        return cls(locale, fraction_digits=2)

    @property
    def locale(self) -> MoneyLocale:
        return self._locale

    @property
    def fraction_digits(self) -> int:
        return self._fraction_digits

    def string(self, value: Decimal) -> Optional[str]:
        """Format $value, or return None if it cannot be rendered (NaN, infinity, too many digits)."""
        parts = self.split_sign(value)
        if parts is None:
            return None
        is_negative, number = parts
        return f"{self._locale.negative_sign}{number}" if is_negative else number

    def split_sign(self, value: Decimal) -> Optional[tuple[bool, str]]:
        """Return (is_negative, unsigned formatted number) so callers can place a symbol between them."""
        if not isinstance(value, Decimal) or not value.is_finite():
            logger.debug(f"NumberFormatter cannot render non-finite or non-Decimal $value {value!r}")
            return None

        try:
            rounded = value.quantize(Decimal(1).scaleb(-self._fraction_digits), context=FORMAT_CONTEXT)
        except DecimalException as e:
            logger.debug(f"NumberFormatter cannot round $value {value} to {self._fraction_digits} digits: {type(e).__name__}")
            return None

        # "-0.00" is shown as zero
        is_negative = rounded < 0
        integer_part, _, fraction_part = f"{rounded.copy_abs():f}".partition(".")

        number = self._group(integer_part)
        if self._fraction_digits > 0:
            number = f"{number}{self._locale.decimal_separator}{fraction_part}"
        return is_negative, number

    def _group(self, digits: str) -> str:
        size = self._locale.grouping_size
        if size == 0 or len(digits) <= size:
            return digits

        groups = []
        while len(digits) > size:
            groups.append(digits[-size:])
            digits = digits[:-size]
        groups.append(digits)
        return self._locale.grouping_separator.join(reversed(groups))
