"""Shared fixtures for the Product Scraper tests."""
import pytest

from product_scraper.layers.assembly import ProductScrapePipeline
from tests.helpers import html_handler, mock_fetcher, page


@pytest.fixture
def pipeline() -> ProductScrapePipeline:
    return ProductScrapePipeline(fetcher=mock_fetcher(html_handler(page())))
