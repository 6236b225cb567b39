from decimal import Decimal

import pytest

from finance_kit.domain.monetary.currency_converter import CurrencyConverter
from finance_kit.domain.monetary.currency_registry import EUR, JPY, USD


def test_convert_multiplies_without_rounding():
    converter = CurrencyConverter()
    assert converter.convert(Decimal("100"), USD, EUR, Decimal("0.9")) == Decimal("90")
    assert converter.convert(Decimal("1.005"), EUR, JPY, "161.23") == Decimal("162.03615")


def test_float_rate_uses_shortest_repr():
    assert CurrencyConverter().convert(Decimal("100"), USD, EUR, 0.9) == Decimal("90.0")
    assert CurrencyConverter.parse_rate(0.9) == Decimal("0.9")


def test_currencies_are_required():
    with pytest.raises(TypeError):
        CurrencyConverter().convert(Decimal(1), "USD", EUR, 1)
    with pytest.raises(TypeError):
        CurrencyConverter().convert(Decimal(1), USD, None, 1)


@pytest.mark.parametrize("rate", [0, Decimal("-0.5"), "", "rate", float("inf")])
def test_invalid_rates(rate):
    with pytest.raises(ValueError):
        CurrencyConverter.parse_rate(rate)
