from decimal import Decimal

import pytest

from src.omcti_portal.omcti_portal.common.formatting import format_currency, format_date, to_decimal


@pytest.mark.parametrize(
    "amount,expected",
    [
        (0, "₹0.00"),
        ("999", "₹999.00"),
        (1000, "₹1,000.00"),
        ("123456.5", "₹1,23,456.50"),
        (Decimal("12345678"), "₹1,23,45,678.00"),
        (-2500, "-₹2,500.00"),
        (None, "₹0.00"),
    ],
)
def test_format_currency_uses_indian_grouping(amount, expected):
    assert format_currency(amount) == expected


def test_format_date():
    assert format_date("2025-02-03") == "Feb 03, 2025"
    assert format_date("2025-02-03 14:05:00") == "Feb 03, 2025"
    assert format_date("yesterday") == "yesterday"
    assert format_date(None) == "-"


def test_to_decimal_is_lenient():
    assert to_decimal("1,200.50") == Decimal("1200.50")
    assert to_decimal("n/a") == Decimal("0")
    assert to_decimal("") == Decimal("0")
