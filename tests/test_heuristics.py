"""Tests for last-resort price selectors."""
import pytest
from bs4 import BeautifulSoup

from product_scraper.layers.heuristics import HeuristicPriceExtractor, parse_price_text
from product_scraper.models.product import ProductDraft
from tests.helpers import page


def run(body: str, draft: ProductDraft = None) -> ProductDraft:
    draft = draft or ProductDraft()
    HeuristicPriceExtractor().extract(BeautifulSoup(page(body=body), "lxml"), draft)
    return draft


@pytest.mark.parametrize(
    "text, expected",
    [
        ("$1,299.00 today", 1299.0),
        ("Now only 45", 45.0),
        ("€ 12.50 (was 20.00)", 12.5),
        ("Price: 3.", 3.0),
        ("Sold out", None),
        ("", None),
    ],
)
def test_parse_price_text(text, expected):
    assert parse_price_text(text) == expected


def test_price_class_span():
    assert run('<span class="price">$1,299.00 today</span>').price == 1299.0


def test_class_containing_price():
    assert run('<div class="product-price__current">USD 64.00</div>').price == 64.0


def test_id_containing_price():
    assert run('<p id="main-price">19.95</p>').price == 19.95


def test_itemprop_price():
    assert run('<meta itemprop="name" content="x"><span itemprop="price">7.25</span>').price == 7.25


def test_selector_without_number_falls_through_to_next():
    body = '<div class="price">Call us</div><span data-price="1250">Now 12.50</span>'
    draft = run(body)
    assert draft.price == 12.5
    assert draft.sources["price"] == "price_selectors"


def test_nothing_matches():
    assert run("<p>Great product</p>").price is None


def test_does_not_run_when_price_already_set():
    draft = ProductDraft()
    draft.fill("price", 5.0, "meta_tags")
    run('<span class="price">$99</span>', draft)
    assert draft.price == 5.0
    assert draft.sources["price"] == "meta_tags"
