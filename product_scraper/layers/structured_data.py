"""
Structured-data extraction for the Product Scraper service.
JSON-LD Product nodes are the highest-priority source for every field.
"""
import json
from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup

from product_scraper.models.product import ProductDraft
from product_scraper.utils.coercion import as_list, first_of, parse_decimal, text_of
from product_scraper.utils.logger import StageLogger

SOURCE = "json_ld"


class StructuredDataExtractor:
    """
    Reads schema.org Product nodes from <script type="application/ld+json">.
    
    Each script block is parsed on its own; a malformed block is skipped and
    the rest are still read. Fields are filled first-wins across all Product
    nodes, so name and price may come from different nodes.
    """
    
    source = SOURCE
    
    def __init__(self):
        self.logger = StageLogger("structured_data")
    
    def extract(self, soup: BeautifulSoup, draft: ProductDraft) -> None:
        products = self._find_products(soup)
        
        for item in products:
            self._apply_product(item, draft)
        
        self.logger.log_extraction(
            source=SOURCE,
            fields_present=draft.get_present_fields(),
            fields_missing=draft.get_missing_fields(),
            products_found=len(products)
        )
    
    def _find_products(self, soup: BeautifulSoup) -> List[Dict[str, Any]]:
        """Parse every JSON-LD block and collect the Product nodes, in document order."""
        products = []
        
        for index, script in enumerate(soup.find_all("script", type="application/ld+json")):
            raw = script.string or script.get_text()
            if not raw or not raw.strip():
                continue
            
            try:
                data = json.loads(raw)
            except (json.JSONDecodeError, ValueError) as e:
                self.logger.log_skip("json_ld_block", reason=str(e), block_index=index)
                continue
            
            products.extend(node for node in self._flatten_jsonld(data) if self._is_product(node))
        
        return products
    
    def _flatten_jsonld(self, data: Any) -> List[Dict[str, Any]]:
        """
        Flatten a JSON-LD document into a list of typed nodes.
        
        Handles single objects, top-level arrays and @graph containers.
        """
        nodes = []
        
        if isinstance(data, dict):
            if "@graph" in data:
                for item in as_list(data["@graph"]):
                    nodes.extend(self._flatten_jsonld(item))
            if "@type" in data:
                nodes.append(data)
        
        elif isinstance(data, list):
            for item in data:
                nodes.extend(self._flatten_jsonld(item))
        
        return nodes
    
    def _is_product(self, node: Dict[str, Any]) -> bool:
        return "Product" in as_list(node.get("@type"))
    
    def _apply_product(self, item: Dict[str, Any], draft: ProductDraft) -> None:
        """Fill still-unset draft fields from one Product node."""
        draft.fill("name", text_of(item.get("name")), SOURCE)
        draft.fill("brand", text_of(first_of(item.get("brand")), "name"), SOURCE)
        draft.fill("image_url", text_of(first_of(item.get("image")), "url"), SOURCE)
        
        if not draft.is_set("price") and item.get("offers"):
            offer = first_of(item["offers"])
            if isinstance(offer, dict):
                self._apply_offer(offer, draft)
    
    def _apply_offer(self, offer: Dict[str, Any], draft: ProductDraft) -> None:
        """
        Resolve price, sale price and currency from an Offer.
        
        offers.price is taken as-is. priceSpecification entries then supply
        the list price (their maximum) and, when the entries disagree, the
        sale price (their minimum).
        """
        draft.fill("price", parse_decimal(offer.get("price")), SOURCE)
        draft.fill("currency", text_of(offer.get("priceCurrency")), SOURCE)
        
        specs = [s for s in as_list(offer.get("priceSpecification")) if isinstance(s, dict)]
        spec_prices = [p for p in (parse_decimal(s.get("price")) for s in specs) if p is not None]
        if not spec_prices:
            return
        
        highest = max(spec_prices)
        lowest = min(spec_prices)
        
        draft.fill("price", highest, SOURCE)
        if lowest != highest:
            draft.fill("sale_price", lowest, SOURCE)
        
        # first entry carrying a currency, regardless of which price it holds
        if not draft.is_set("currency"):
            draft.fill("currency", self._first_spec_currency(specs), SOURCE)
    
    def _first_spec_currency(self, specs: List[Dict[str, Any]]) -> Optional[str]:
        for spec in specs:
            currency = text_of(spec.get("priceCurrency"))
            if currency:
                return currency
        return None
