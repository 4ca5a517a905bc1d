"""
Meta-tag extraction for the Product Scraper service.
Open Graph, Twitter-card and product:* tags fill whatever JSON-LD left unset.
"""
from typing import Iterable, Optional, Tuple

from bs4 import BeautifulSoup

from product_scraper.models.product import ProductDraft
from product_scraper.utils.coercion import parse_decimal
from product_scraper.utils.logger import StageLogger

SOURCE = "meta_tags"

# (attribute, value) pairs tried in order; first tag with non-empty content wins
NAME_TAGS = [
    ("property", "og:title"),
    ("name", "og:title"),
    ("property", "twitter:title"),
    ("name", "twitter:title"),
]
IMAGE_TAGS = [
    ("property", "og:image"),
    ("name", "og:image"),
    ("property", "twitter:image"),
    ("name", "twitter:image"),
]
PRICE_TAGS = [
    ("property", "og:price:amount"),
    ("property", "product:price:amount"),
]
CURRENCY_TAGS = [
    ("property", "og:price:currency"),
    ("property", "product:price:currency"),
]
BRAND_TAGS = [
    ("property", "og:brand"),
    ("property", "product:brand"),
    ("name", "brand"),
]
SITE_NAME_TAGS = [
    ("property", "og:site_name"),
    ("property", "site_name"),
    ("property", "product:site_name"),
    ("name", "site_name"),
]


def meta_content(soup: BeautifulSoup, candidates: Iterable[Tuple[str, str]]) -> Optional[str]:
    """Return the content of the first matching <meta> tag that has any."""
    for attr, value in candidates:
        tag = soup.find("meta", attrs={attr: value})
        if tag and tag.get("content"):
            content = tag["content"].strip()
            if content:
                return content
    return None


class MetaTagExtractor:
    """Second-priority source: social-sharing and product meta tags."""
    
    source = SOURCE
    
    def __init__(self):
        self.logger = StageLogger("meta_tags")
    
    def extract(self, soup: BeautifulSoup, draft: ProductDraft) -> None:
        if not draft.is_set("name"):
            draft.fill("name", meta_content(soup, NAME_TAGS) or self._title_text(soup), SOURCE)
        
        if not draft.is_set("image_url"):
            draft.fill("image_url", meta_content(soup, IMAGE_TAGS), SOURCE)
        
        if not draft.is_set("price"):
            draft.fill("price", parse_decimal(meta_content(soup, PRICE_TAGS)), SOURCE)
        
        if not draft.is_set("currency"):
            draft.fill("currency", meta_content(soup, CURRENCY_TAGS), SOURCE)
        
        if not draft.is_set("brand"):
            draft.fill("brand", meta_content(soup, BRAND_TAGS), SOURCE)
        
        self.logger.log_extraction(
            source=SOURCE,
            fields_present=draft.get_present_fields(),
            fields_missing=draft.get_missing_fields()
        )
    
    def fill_brand_from_site_name(self, soup: BeautifulSoup, draft: ProductDraft) -> None:
        """Last brand fallback: the site's own name."""
        if draft.is_set("brand"):
            return
        if draft.fill("brand", meta_content(soup, SITE_NAME_TAGS), "site_name"):
            self.logger.log_decision(
                decision="brand_from_site_name",
                reason="no brand in structured data or brand meta tags",
                brand=draft.brand
            )
    
    def _title_text(self, soup: BeautifulSoup) -> Optional[str]:
        title_tag = soup.find("title")
        if title_tag:
            return title_tag.get_text().strip() or None
        return None
