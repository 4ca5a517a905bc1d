"""Models package initialization."""
from product_scraper.models.product import Category, ProductDraft, ProductExtraction
from product_scraper.models.errors import (
    ScrapeErrorKind,
    ScrapeError,
    InvalidURLError,
    BlockedError,
    FetchFailedError,
    ScrapeFailure,
)

__all__ = [
    "Category",
    "ProductDraft",
    "ProductExtraction",
    "ScrapeErrorKind",
    "ScrapeError",
    "InvalidURLError",
    "BlockedError",
    "FetchFailedError",
    "ScrapeFailure",
]
