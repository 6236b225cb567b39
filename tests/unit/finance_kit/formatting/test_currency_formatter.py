from decimal import Decimal

import pytest

from finance_kit.domain.monetary.currency_registry import CHF, DKK, EUR, JPY, USD
from finance_kit.domain.monetary.money import Money
from finance_kit.formatting.currency_formatter import CurrencyFormatter
from finance_kit.formatting.money_locale import DA_DK, DE_CH, DE_DE, EN_US, JA_JP


@pytest.mark.parametrize(
    "currency, locale, amount, expected",
    [
        (USD, EN_US, "1234.5", "$1,234.50"),
        (USD, EN_US, "-1234.5", "-$1,234.50"),
        (EUR, DE_DE, "1234.5", "1.234,50 €"),
        (DKK, DA_DK, "-1234.5", "-1.234,50 kr."),
        (CHF, DE_CH, "1234.5", "CHF 1\u2019234.50"),
        (JPY, JA_JP, "1234.5", "¥1,234"),
        (JPY, JA_JP, "1235.5", "¥1,236"),
    ],
)
def test_format_amount(currency, locale, amount, expected):
    assert CurrencyFormatter(currency, locale).format_amount(Decimal(amount)) == expected


def test_string_uses_rounded_amount():
    formatter = CurrencyFormatter(USD, EN_US)
    assert formatter.string(Money(Decimal("0.125"))) == "$0.12"


def test_unrenderable_amount_returns_none():
    assert CurrencyFormatter(USD, EN_US).format_amount(Decimal("Infinity")) is None


def test_currency_is_required():
    with pytest.raises(TypeError):
        CurrencyFormatter("USD", EN_US)


def test_properties():
    formatter = CurrencyFormatter(EUR, DE_DE)
    assert formatter.currency is EUR
    assert formatter.locale is DE_DE
