from decimal import Decimal

import pandas as pd
import pytest

from finance_kit.domain.monetary.currency_registry import EUR, USD
from finance_kit.domain.monetary.money import Money
from finance_kit.utils.dataframe_tools import amounts_to_series, money_from_frame, sum_money


def test_money_from_mixed_column_with_currency_codes():
    df = pd.DataFrame(
        {
            "amount": [Decimal("1.005"), 2, 0.5, "3.25"],
            "ccy": ["USD", "eur", None, ""],
        }
    )
    values = money_from_frame(df, "amount", currency_column="ccy")

    assert [m.raw_value for m in values] == [Decimal("1.005"), Decimal(2), Decimal("0.5"), Decimal("3.25")]
    assert [m.currency for m in values] == [USD, EUR, None, None]


def test_money_from_float_column_with_fixed_currency():
    df = pd.DataFrame({"amount": [0.1, 0.2]})
    values = money_from_frame(df, "amount", currency=EUR)

    assert all(m.currency is EUR for m in values)
    assert sum_money(values) == Money(Decimal("0.3"))
    assert amounts_to_series(values).tolist() == [Decimal("0.10"), Decimal("0.20")]


def test_int_column_is_exact():
    df = pd.DataFrame({"amount": [10, 20]})
    values = money_from_frame(df, "amount")
    assert [m.raw_value for m in values] == [Decimal(10), Decimal(20)]


def test_unreadable_cell_names_row():
    df = pd.DataFrame({"amount": ["1.00", "oops"]}, index=["a", "b"])
    with pytest.raises(ValueError, match="row b"):
        money_from_frame(df, "amount")


def test_nan_cell_is_rejected():
    df = pd.DataFrame({"amount": [1.0, float("nan")]})
    with pytest.raises(ValueError):
        money_from_frame(df, "amount")


def test_unknown_currency_code():
    df = pd.DataFrame({"amount": [1], "ccy": ["XYZ"]})
    with pytest.raises(ValueError, match="XYZ"):
        money_from_frame(df, "amount", currency_column="ccy")


def test_argument_validation():
    df = pd.DataFrame({"amount": [1], "ccy": ["USD"]})
    with pytest.raises(ValueError):
        money_from_frame(df, "missing")
    with pytest.raises(ValueError):
        money_from_frame(df, "amount", currency_column="ccy", currency=USD)
    with pytest.raises(ValueError):
        money_from_frame([1, 2], "amount")


def test_sum_money_of_nothing_is_zero():
    total = sum_money([])
    assert total.is_zero
    assert total.currency is None


def test_amounts_to_series_name():
    series = amounts_to_series([Money(Decimal("1.005"))], name="total")
    assert series.name == "total"
    assert series.tolist() == [Decimal("1.00")]
