from __future__ import annotations

from decimal import Decimal, InvalidOperation

from finance_kit.domain.monetary.currency import Currency
from finance_kit.domain.monetary.rounding import MONEY_CONTEXT
from finance_kit.utils.decimal_tools import DecimalLike, as_decimal


class CurrencyConverter:
    """Converts raw decimal amounts between currencies at a caller-supplied rate.

    The conversion is a pure multiplication: no rounding, no rate lookup, no caching.
    $rate is quoted as "units of $to_currency per 1 unit of $from_currency".
    """

    def convert(self, amount: Decimal, from_currency: Currency, to_currency: Currency, rate: DecimalLike) -> Decimal:
        """Convert $amount from $from_currency to $to_currency.

        Args:
            amount: Unrounded amount in $from_currency.
            from_currency: Currency $amount is in.
            to_currency: Target currency.
            rate: Conversion rate as a Decimal-like scalar; floats are read via their shortest repr.

        Returns:
            Unrounded amount in $to_currency.

        Raises:
            TypeError: If a currency argument is not a Currency.
            ValueError: If $rate is not a finite, strictly positive number.
        """
        # Raise: both sides of the conversion must be real currencies
        if not isinstance(from_currency, Currency):
            raise TypeError(f"Cannot call `CurrencyConverter.convert` because $from_currency is not Currency (got type '{type(from_currency).__name__}')")
        if not isinstance(to_currency, Currency):
            raise TypeError(f"Cannot call `CurrencyConverter.convert` because $to_currency is not Currency (got type '{type(to_currency).__name__}')")

        decimal_rate = self.parse_rate(rate)
        return MONEY_CONTEXT.multiply(amount, decimal_rate)

    @staticmethod
    def parse_rate(rate: DecimalLike) -> Decimal:
        """Convert $rate to Decimal and check it is usable for conversion."""
        try:
            decimal_rate = as_decimal(rate)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot use $rate ({rate!r}) for conversion because it cannot be converted to Decimal") from e

        # Raise: a rate must scale the amount by a real, positive factor
        if not decimal_rate.is_finite() or decimal_rate <= 0:
            raise ValueError(f"Cannot use $rate ({rate!r}) for conversion because it is not a finite positive number")

        return decimal_rate
