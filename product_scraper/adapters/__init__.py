"""Adapters package initialization."""
from product_scraper.adapters.page_fetcher import PageFetcher

__all__ = ["PageFetcher"]
