"""
Keyword categorization for the Product Scraper service.
"""
import re
from typing import List, Optional, Pattern, Tuple

from product_scraper.models.product import Category, ProductDraft
from product_scraper.utils.logger import StageLogger

# Checked in order; the first group that matches decides the category
CATEGORY_PATTERNS: List[Tuple[Pattern, Category]] = [
    (re.compile(r"\b(shirt|tee|blouse|top|tank|polo)\b", re.I), Category.SHIRTS),
    (re.compile(r"\b(pant|jean|trouser|short|skirt)\b", re.I), Category.PANTS),
    (re.compile(r"\b(shoe|sneaker|boot|sandal|heel|loafer)\b", re.I), Category.SHOES),
    (re.compile(r"\b(jacket|coat|hoodie|sweater|cardigan)\b", re.I), Category.OUTERWEAR),
    (re.compile(r"\b(bag|hat|watch|belt|scarf|jewelry|accessory)\b", re.I), Category.ACCESSORIES),
]


def categorize(url: str, name: Optional[str]) -> Category:
    """Classify a product from its URL and (possibly missing) name."""
    text = f"{url} {name or ''}".lower()
    
    for pattern, category in CATEGORY_PATTERNS:
        if pattern.search(text):
            return category
    
    return Category.OTHER


class Categorizer:
    """Pipeline stage wrapping categorize()."""
    
    source = "keywords"
    
    def __init__(self):
        self.logger = StageLogger("categorization")
    
    def apply(self, url: str, draft: ProductDraft) -> None:
        if draft.is_set("category"):
            return
        
        category = categorize(url, draft.name)
        draft.fill("category", category, self.source)
        self.logger.log_decision(
            decision="category_assigned",
            reason="keyword_match" if category is not Category.OTHER else "no_keyword_match",
            url=url,
            category=category.value
        )
