"""Tests for the value coercion helpers."""
import pytest

from product_scraper.utils.coercion import as_list, first_of, parse_decimal, text_of


def test_as_list_wraps_scalars_and_drops_none():
    assert as_list({"a": 1}) == [{"a": 1}]
    assert as_list([1, 2]) == [1, 2]
    assert as_list(None) == []


def test_first_of():
    assert first_of(["a", "b"]) == "a"
    assert first_of([]) is None
    assert first_of("a") == "a"


def test_text_of_string_or_object():
    assert text_of("  Acme ") == "Acme"
    assert text_of({"@type": "Brand", "name": "Acme"}, "name") == "Acme"
    assert text_of({"@type": "Brand"}, "name") is None
    assert text_of({"name": "Acme"}) is None
    assert text_of(42) is None
    assert text_of("   ") is None


@pytest.mark.parametrize(
    "value, expected",
    [
        ("29.99", 29.99),
        (" 29.99 USD", 29.99),
        (45, 45.0),
        ("0", 0.0),
        (".5", 0.5),
    ],
)
def test_parse_decimal_accepts(value, expected):
    assert parse_decimal(value) == expected


@pytest.mark.parametrize("value", ["", "abc", "$10", None, True, "-5", float("nan"), float("inf"), {"price": 1}])
def test_parse_decimal_rejects(value):
    assert parse_decimal(value) is None
