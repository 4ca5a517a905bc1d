"""Layers package initialization."""
from product_scraper.layers.url_validation import URLValidator, ValidatedURL
from product_scraper.layers.structured_data import StructuredDataExtractor
from product_scraper.layers.meta_tags import MetaTagExtractor
from product_scraper.layers.heuristics import HeuristicPriceExtractor
from product_scraper.layers.categorization import Categorizer, categorize
from product_scraper.layers.normalization import Normalizer
from product_scraper.layers.assembly import ProductScrapePipeline

__all__ = [
    "URLValidator",
    "ValidatedURL",
    "StructuredDataExtractor",
    "MetaTagExtractor",
    "HeuristicPriceExtractor",
    "Categorizer",
    "categorize",
    "Normalizer",
    "ProductScrapePipeline",
]
