__version__ = "0.1.0"

from finance_kit.domain.monetary.currency import Currency, CurrencyType
from finance_kit.domain.monetary.currency_registry import USD, EUR, GBP, JPY, CHF, DKK, SEK, BTC
from finance_kit.domain.monetary.errors import MoneyArithmeticError, MoneyDecodeError
from finance_kit.domain.monetary.money import Money

__all__ = [
    "Currency",
    "CurrencyType",
    "Money",
    "MoneyArithmeticError",
    "MoneyDecodeError",
    "USD",
    "EUR",
    "GBP",
    "JPY",
    "CHF",
    "DKK",
    "SEK",
    "BTC",
]
