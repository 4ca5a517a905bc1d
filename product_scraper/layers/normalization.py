"""
Normalization for the Product Scraper service.
Cleans the scraped name, absolutizes the image URL and settles price/currency.
"""
import re
from typing import Optional
from urllib.parse import urljoin

from product_scraper.config import config
from product_scraper.models.product import ProductDraft
from product_scraper.utils.logger import StageLogger

# trailing " | Site Name", " - Site Name", " – Site Name"
SITE_SUFFIX = re.compile(r"\s*[|\-–]\s*.+$")


def clean_name(name: Optional[str]) -> Optional[str]:
    """Strip a trailing site-name suffix; empty results become None."""
    if not name:
        return None
    cleaned = SITE_SUFFIX.sub("", name, count=1).strip()
    return cleaned or None


def absolutize_url(url: Optional[str], origin: str) -> Optional[str]:
    """
    Resolve a relative URL against the page origin.
    
    URLs already starting with "http" are returned unchanged, as is any
    value that fails to resolve.
    """
    if not url or url.startswith("http"):
        return url
    try:
        return urljoin(origin + "/", url)
    except ValueError:
        return url


class Normalizer:
    """Final cleanup applied once every extraction source has run."""
    
    def __init__(self):
        self.logger = StageLogger("normalization")
    
    def apply(self, origin: str, draft: ProductDraft) -> None:
        if draft.name:
            draft.name = clean_name(draft.name)
        
        if draft.image_url:
            resolved = absolutize_url(draft.image_url, origin)
            if resolved != draft.image_url:
                self.logger.log_decision(
                    decision="image_url_resolved",
                    reason="relative image url",
                    raw=draft.image_url,
                    resolved=resolved
                )
            draft.image_url = resolved
        
        self._settle_sale_price(draft)
        
        if draft.fill("currency", config.DEFAULT_CURRENCY, "default"):
            self.logger.log_decision(
                decision="currency_defaulted",
                reason="no currency found in any source",
                currency=config.DEFAULT_CURRENCY
            )
    
    def _settle_sale_price(self, draft: ProductDraft) -> None:
        """A sale price only stands next to a higher list price."""
        if draft.sale_price is None:
            return
        if draft.price is None or draft.sale_price >= draft.price:
            self.logger.log_decision(
                decision="sale_price_dropped",
                reason="no genuine discount",
                price=draft.price,
                sale_price=draft.sale_price
            )
            draft.sale_price = None
            draft.sources.pop("sale_price", None)
