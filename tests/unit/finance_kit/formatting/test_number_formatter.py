from decimal import Decimal

import pytest

from finance_kit.formatting.money_locale import DE_CH, DE_DE, EN_US, FR_FR, SV_SE
from finance_kit.formatting.number_formatter import NumberFormatter


@pytest.mark.parametrize(
    "locale, value, expected",
    [
        (EN_US, "1234567.891", "1,234,567.89"),
        (EN_US, "999", "999.00"),
        (EN_US, "1000", "1,000.00"),
        (EN_US, "-1000.5", "-1,000.50"),
        (DE_DE, "1234567.891", "1.234.567,89"),
        (DE_CH, "1234.5", "1\u2019234.50"),
        (FR_FR, "1234.5", "1\u202f234,50"),
        (SV_SE, "1234567.5", "1\u00a0234\u00a0567,50"),
    ],
)
def test_monetary_formatting(locale, value, expected):
    assert NumberFormatter.monetary(locale).string(Decimal(value)) == expected


def test_fraction_digits_round_half_even():
    formatter = NumberFormatter(EN_US, fraction_digits=0)
    assert formatter.string(Decimal("2.5")) == "2"
    assert formatter.string(Decimal("3.5")) == "4"


def test_negative_zero_is_shown_as_zero():
    assert NumberFormatter.monetary(EN_US).string(Decimal("-0.001")) == "0.00"


@pytest.mark.parametrize("value", [Decimal("NaN"), Decimal("Infinity"), Decimal("1E+70"), 1.5])
def test_unrenderable_values_return_none(value):
    assert NumberFormatter.monetary(EN_US).string(value) is None


def test_negative_fraction_digits_rejected():
    with pytest.raises(ValueError):
        NumberFormatter(EN_US, fraction_digits=-1)
