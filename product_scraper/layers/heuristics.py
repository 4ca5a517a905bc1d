"""
Heuristic price extraction for the Product Scraper service.
Last-resort source: scans visible price-like elements when no structured price exists.
"""
import re
from typing import Optional

from bs4 import BeautifulSoup

from product_scraper.models.product import ProductDraft
from product_scraper.utils.coercion import parse_decimal
from product_scraper.utils.logger import StageLogger

SOURCE = "price_selectors"

# Common price containers, tried in order
PRICE_SELECTORS = [
    ".price",
    "[class*='price']",
    "[id*='price']",
    "[data-price]",
    "[itemprop='price']",
]

# digits with optional grouping commas and one decimal point, e.g. "1,299.00"
PRICE_TOKEN = re.compile(r"\d[\d,]*\.?\d*")


def parse_price_text(text: str) -> Optional[float]:
    """Pull the first numeric token out of visible price text."""
    if not text:
        return None
    
    match = PRICE_TOKEN.search(text)
    if not match:
        return None
    
    return parse_decimal(match.group().replace(",", ""))


class HeuristicPriceExtractor:
    """Fills price from the first selector whose text yields a valid number."""
    
    source = SOURCE
    
    def __init__(self):
        self.logger = StageLogger("heuristics")
    
    def extract(self, soup: BeautifulSoup, draft: ProductDraft) -> None:
        if draft.is_set("price"):
            return
        
        for selector in PRICE_SELECTORS:
            element = soup.select_one(selector)
            if element is None:
                continue
            
            price = parse_price_text(element.get_text())
            if price is None:
                self.logger.log_skip("price_selector", reason="no numeric price in text", selector=selector)
                continue
            
            draft.fill("price", price, SOURCE)
            self.logger.log_decision(
                decision="price_from_selector",
                reason="no structured or meta price",
                selector=selector,
                price=price
            )
            return
        
        self.logger.log_action("price_selector_scan", "exhausted", selectors=len(PRICE_SELECTORS))
