"""Tests for the currency display helpers."""
import pytest

from product_scraper.utils.currency import (
    convert_to_usd,
    format_usd_conversion,
    get_currency_symbol,
    is_supported_currency,
)


def test_usd_is_unchanged():
    assert convert_to_usd(42.0, "USD") == 42.0


def test_known_currency_is_divided_by_rate():
    assert convert_to_usd(149.5, "JPY") == pytest.approx(1.0)
    assert convert_to_usd(92.0, "EUR") == pytest.approx(100.0)


def test_unknown_currency_is_unchanged():
    assert convert_to_usd(10.0, "XYZ") == 10.0
    assert not is_supported_currency("XYZ")


@pytest.mark.parametrize("code, symbol", [("USD", "$"), ("EUR", "€"), ("CAD", "CA$"), ("CHF", "CHF")])
def test_currency_symbol(code, symbol):
    assert get_currency_symbol(code) == symbol


def test_format_usd_conversion():
    assert format_usd_conversion(108.6956) == "≈ $108.70"
