"""Tests for amount helpers."""
import pytest
from decimal import Decimal

from app.utils.amounts import format_amount, sales_total, sum_amounts, to_decimal


class TestFormatAmount:

    @pytest.mark.parametrize("value,expected", [
        (18, "18"),
        (18.0, "18"),
        ("10.50", "10.5"),
        (Decimal("1E+3"), "1000"),
        (0.1, "0.1"),
        (0, "0"),
        (Decimal("0.00"), "0"),
        ("-2.50", "-2.5"),
    ])
    def test_canonical_text(self, value, expected):
        assert format_amount(value) == expected

    def test_round_trip_is_stable(self):
        """Formatting a formatted amount never changes it."""
        text = format_amount(99.95)
        assert format_amount(text) == text

    @pytest.mark.parametrize("value", ["abc", "", "NaN", "Infinity"])
    def test_rejects_non_amounts(self, value):
        with pytest.raises(ValueError):
            format_amount(value)

    def test_rejects_booleans(self):
        with pytest.raises(TypeError):
            to_decimal(True)


def test_sum_amounts_is_exact():
    assert sum_amounts([0.1, 0.2]) == "0.3"
    assert sum_amounts([]) == "0"


def test_sales_total():
    assert sales_total(10, 5, 3) == "18"
    assert sales_total(100, 50, 25) == "175"
    assert sales_total("0", 0, 0.0) == "0"
    assert sales_total("99.99", "0.01", 0) == "100"
