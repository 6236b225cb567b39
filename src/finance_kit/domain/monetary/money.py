from __future__ import annotations

import re
from decimal import Decimal, DecimalException
from typing import Callable, Optional

from finance_kit.domain.monetary.currency import Currency
from finance_kit.domain.monetary.currency_converter import CurrencyConverter
from finance_kit.domain.monetary.errors import MoneyArithmeticError
from finance_kit.domain.monetary.rounding import MONEY_CONTEXT, round_amount
from finance_kit.formatting.currency_formatter import CurrencyFormatter
from finance_kit.formatting.money_locale import MoneyLocale
from finance_kit.formatting.number_formatter import NumberFormatter
from finance_kit.utils.decimal_tools import DecimalLike, float_to_decimal


# Stricter than float(): no whitespace, underscores, non-ASCII digits or nan/inf
_NUMERIC_TEXT = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


class Money:
    """An amount of money, optionally in a given currency.

    Money keeps two views of its value:
    - $raw_value: the exact, unrounded Decimal. Arithmetic works on it, so chains of
      operations do not accumulate rounding error.
    - $amount: $raw_value rounded to 2 fractional digits with banker's rounding.
      Equality, ordering, hashing, sign checks and `str()` all use it.

    Currency is a tag only. It takes no part in equality or ordering, and binary
    arithmetic drops it: `Money(1, USD) + Money(2, EUR)` is a unit-less `Money(3)`.
    """

    __slots__ = ("_raw_value", "_currency")

    def __init__(self, value: Decimal | int | float, currency: Optional[Currency] = None):
        """Create Money from a decimal, whole-number or float value.

        Decimals and ints are stored unmodified. Floats go through `float_to_decimal`,
        which keeps 17 significant digits; that is the only place precision is lost.

        Args:
            value: Amount as Decimal, int or float. Use `Money.from_string` for text.
            currency: Currency the money is in, or None for a unit-less amount.

        Raises:
            TypeError: If $value has an unsupported type or $currency is not a Currency.
            ValueError: If $value is NaN or infinite.
        """
        # Raise: $currency must be a Currency when provided
        if currency is not None and not isinstance(currency, Currency):
            raise TypeError(f"Cannot call `Money.__init__` because $currency is not Currency (got type '{type(currency).__name__}'). Pass None for a unit-less amount")

        # Raise: text must go through `from_string`, which reports bad input as None
        if isinstance(value, str):
            raise TypeError(f"Cannot call `Money.__init__` with string $value ('{value}'). Use `Money.from_string` instead")

        if isinstance(value, bool) or not isinstance(value, (Decimal, int, float)):
            raise TypeError(f"Cannot call `Money.__init__` because $value has unsupported type '{type(value).__name__}'")

        if isinstance(value, float):
            value = float_to_decimal(value)
        elif isinstance(value, int):
            value = Decimal(value)

        # Raise: NaN and infinities have no amount
        if not value.is_finite():
            raise ValueError(f"Cannot call `Money.__init__` because $value ({value}) is not finite")

        self._raw_value = value
        self._currency = currency

    # region Alternative constructors

    @classmethod
    def of(cls, value: Decimal | int | float, currency: Currency) -> Money:
        """Shorthand for Money in a given currency, e.g. `Money.of(Decimal("9.99"), EUR)`.

        Raises:
            TypeError: If $currency is not a Currency (None included).
        """
        # Raise: unit-less money goes through the plain constructor
        if not isinstance(currency, Currency):
            raise TypeError(f"Cannot call `Money.of` because $currency is not Currency (got type '{type(currency).__name__}')")
        return cls(value, currency)

    @classmethod
    def from_float(cls, value: float, currency: Optional[Currency] = None) -> Money:
        """Create Money from a binary float (see `float_to_decimal` for the precision kept)."""
        return cls(float(value), currency)

    @classmethod
    def from_string(cls, text: str, currency: Optional[Currency] = None) -> Optional[Money]:
        """Create Money from numeric text, or return None if $text is not a valid finite number.

        Only plain ASCII numerals are accepted: optional sign, digits with an optional
        decimal point, optional exponent (e.g. "12.5", "-.5", "1e3"). Whitespace, digit
        group underscores, non-ASCII digits and "nan"/"inf" give None.

        The text is read as a float, so it follows the float path. Excess precision is
        not rejected here; it is rounded away by $amount.

        Examples:
            >>> Money.from_string("12.5").raw_value
            Decimal('12.5')
            >>> Money.from_string("abc") is None
            True
        """
        if not isinstance(text, str) or _NUMERIC_TEXT.fullmatch(text) is None:
            return None

        try:
            return cls(float_to_decimal(float(text)), currency)
        except ValueError:
            # Exponents past the float range parse as infinity
            return None

    @classmethod
    def decode(cls, value: object) -> Money:
        """Create unit-less Money from a serialized scalar (see `finance_kit.serialization.json_codec`)."""
        from finance_kit.serialization.json_codec import decode_money

        return decode_money(value)

    def encode(self) -> float:
        """Serialize to a single float equal to $amount. Currency is not encoded."""
        from finance_kit.serialization.json_codec import encode_money

        return encode_money(self)

    # endregion

    # region Properties

    @property
    def raw_value(self) -> Decimal:
        """The exact, unrounded value.

        Prefer $amount for anything shown to users or compared; $raw_value exists for
        arithmetic and for callers that need the unrounded figure explicitly.
        """
        return self._raw_value

    @property
    def currency(self) -> Optional[Currency]:
        return self._currency

    @property
    def amount(self) -> Decimal:
        """$raw_value rounded to 2 fractional digits, half-to-even.

        Raises:
            MoneyArithmeticError: If rounding breaks the strict rounding policy.
        """
        return round_amount(self._raw_value)

    @property
    def is_zero(self) -> bool:
        """True if the rounded amount is exactly zero."""
        return self.amount.is_zero()

    @property
    def is_positive(self) -> bool:
        """True if the rounded amount is zero or more (zero counts as positive)."""
        return self.is_zero or self.is_greater_than_zero

    @property
    def is_negative(self) -> bool:
        """True if the rounded amount is less than zero."""
        return self.amount < 0

    @property
    def is_greater_than_zero(self) -> bool:
        """True if the rounded amount is strictly greater than zero."""
        return self.amount > 0

    # endregion

    # region Conversion & formatting

    def convert(self, to: Currency, rate: DecimalLike) -> Money:
        """Return a new Money in currency $to, scaled by $rate.

        Without a source currency no conversion happens: the result keeps the same
        $raw_value and stays unit-less (it is NOT relabeled as $to).

        Zero and negative rates are rejected even though multiplying by them is
        well defined; no exchange rate can be non-positive, so such a value is a
        caller bug rather than a conversion.

        Args:
            to: Target currency.
            rate: Units of $to per 1 unit of this money's currency.

        Returns:
            Money: Converted, unrounded amount in $to.

        Raises:
            TypeError: If $to is not a Currency.
            ValueError: If $rate is not a finite positive number.
        """
        if self._currency is None:
            return Money(self._raw_value, self._currency)

        converted = _apply("convert", lambda: CurrencyConverter().convert(self._raw_value, self._currency, to, rate))
        return Money(converted, to)

    def formatted_string(self, locale: Optional[MoneyLocale] = None) -> Optional[str]:
        """Rounded amount formatted for display, with the currency symbol when a currency is set.

        Args:
            locale: Locale conventions; None uses the configured default locale.

        Returns:
            Formatted string, or None if the formatter could not produce one.
        """

        if self._currency is not None:
            return CurrencyFormatter(self._currency, locale).string(self)
        return NumberFormatter.monetary(locale).string(self.amount)

    # endregion

    # region Comparison (rounded amount only, currency ignored)

    def __eq__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount == other.amount

    def __lt__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount < other.amount

    def __le__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount <= other.amount

    def __gt__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount > other.amount

    def __ge__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount >= other.amount

    def __hash__(self) -> int:
        """Hash the rounded amount, same as equality."""
        return hash(self.amount)

    # endregion

    # region Arithmetic (raw values, currency dropped)

    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return Money(_apply("+", lambda: MONEY_CONTEXT.add(self._raw_value, other._raw_value)))

    def __radd__(self, other):
        """Support `sum()`, which starts from int 0."""
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return Money(self._raw_value)
        return NotImplemented

    def __sub__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return Money(_apply("-", lambda: MONEY_CONTEXT.subtract(self._raw_value, other._raw_value)))

    def __mul__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return Money(_apply("*", lambda: MONEY_CONTEXT.multiply(self._raw_value, other._raw_value)))

    def __truediv__(self, other):
        """Divide raw values; return None when $other rounds to zero."""
        if not isinstance(other, Money):
            return NotImplemented
        if other.is_zero:
            return None
        return Money(_apply("/", lambda: MONEY_CONTEXT.divide(self._raw_value, other._raw_value)))

    def __neg__(self) -> Money:
        return Money(MONEY_CONTEXT.minus(self._raw_value), self._currency)

    def __abs__(self) -> Money:
        return Money(MONEY_CONTEXT.abs(self._raw_value), self._currency)

    # endregion

    # region String representations

    def __str__(self) -> str:
        """Rounded amount as a plain decimal string, e.g. '12.35'."""
        return str(self.amount)

    def __repr__(self) -> str:
        code = self._currency.code if self._currency is not None else None
        return f"{self.__class__.__name__}({self._raw_value}, {code})"

    # endregion


def _apply(operation: str, compute: Callable[[], Decimal]) -> Decimal:
    """Run a money-context computation, reporting trapped decimal signals as MoneyArithmeticError."""
    try:
        return compute()
    except DecimalException as e:
        raise MoneyArithmeticError(f"Cannot compute Money `{operation}`: {type(e).__name__}") from e
