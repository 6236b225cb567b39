from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from finance_kit.domain.monetary.currency import Currency
from finance_kit.formatting.money_locale import MoneyLocale
from finance_kit.formatting.number_formatter import NumberFormatter

if TYPE_CHECKING:
    from finance_kit.domain.monetary.money import Money


logger = logging.getLogger(__name__)


class CurrencyFormatter:
    """Format amounts with a currency symbol according to a locale.

    The number of fraction digits follows $currency.precision (e.g. 0 for JPY).
    Output is deterministic for a given (amount, currency, locale).

    Examples:
        >>> from finance_kit.domain.monetary.currency_registry import USD
        >>> from finance_kit.formatting.money_locale import EN_US
        >>> CurrencyFormatter(USD, EN_US).format_amount(Decimal("-1234.5"))
        '-$1,234.50'
    """

    __slots__ = ("_currency", "_number_formatter")

    def __init__(self, currency: Currency, locale: Optional[MoneyLocale] = None) -> None:
        # Raise: symbol and precision come from $currency
        if not isinstance(currency, Currency):
            raise TypeError(f"Cannot call `CurrencyFormatter.__init__` because $currency is not Currency (got type '{type(currency).__name__}')")

        self._currency = currency
        self._number_formatter = NumberFormatter(locale, fraction_digits=currency.precision)

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def locale(self) -> MoneyLocale:
        return self._number_formatter.locale

    def string(self, money: Money) -> Optional[str]:
        """Format the rounded amount of $money with this formatter's currency, or None on failure."""
        return self.format_amount(money.amount)

    def format_amount(self, amount: Decimal) -> Optional[str]:
        """Format $amount with this formatter's currency symbol, or None if it cannot be rendered."""
        parts = self._number_formatter.split_sign(amount)
        if parts is None:
            logger.debug(f"CurrencyFormatter for '{self._currency.code}' returned no string for $amount {amount!r}")
            return None

        is_negative, number = parts
        locale = self.locale
        spacing = " " if locale.symbol_spacing else ""
        if locale.symbol_first:
            body = f"{self._currency.symbol}{spacing}{number}"
        else:
            body = f"{number}{spacing}{self._currency.symbol}"

        return f"{locale.negative_sign}{body}" if is_negative else body
