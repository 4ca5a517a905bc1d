"""Tests for URL validation."""
import pytest

from product_scraper.layers.url_validation import URLValidator
from product_scraper.models.errors import InvalidURLError, ScrapeErrorKind


@pytest.fixture
def validator():
    return URLValidator()


def test_valid_url_exposes_origin(validator):
    target = validator.validate("https://store.example/products/shoe?id=1")
    assert target.url == "https://store.example/products/shoe?id=1"
    assert target.origin == "https://store.example"


def test_non_default_port_is_kept_in_origin(validator):
    assert validator.validate("http://store.example:8080/p").origin == "http://store.example:8080"


def test_default_port_is_dropped_from_origin(validator):
    assert validator.validate("https://store.example:443/p").origin == "https://store.example"


@pytest.mark.parametrize("raw", ["not a url", "store.example/p", "ftp://store.example/file", "https://"])
def test_invalid_urls_are_rejected(validator, raw):
    with pytest.raises(InvalidURLError) as exc_info:
        validator.validate(raw)
    assert exc_info.value.kind is ScrapeErrorKind.INVALID_URL
    assert exc_info.value.message == "Invalid URL format"


@pytest.mark.parametrize("raw", ["", "   "])
def test_empty_url_is_required(validator, raw):
    with pytest.raises(InvalidURLError, match="URL is required"):
        validator.validate(raw)


def test_long_url_is_accepted(validator):
    url = "https://store.example/p/shirt?q=" + "a" * 2100
    target = validator.validate(url)
    assert target.url == url
    assert target.origin == "https://store.example"
