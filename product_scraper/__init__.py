"""Product Scraper: product metadata extraction from arbitrary product pages."""

__version__ = "1.0.0"
