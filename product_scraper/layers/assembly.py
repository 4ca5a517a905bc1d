"""
Scrape pipeline for the Product Scraper service.

Runs the stages strictly in priority order:
    URL validation -> fetch -> JSON-LD -> meta tags -> price selectors
    -> categorization -> site-name brand -> normalization

Each extraction source only fills fields still unset by a higher-priority
source. Only InvalidURL, Blocked and FetchFailed abort a scrape; any other
failure inside one source means that source contributed nothing.
"""
from typing import Optional, Union

from bs4 import BeautifulSoup

from product_scraper.adapters.page_fetcher import PageFetcher
from product_scraper.layers.categorization import Categorizer
from product_scraper.layers.heuristics import HeuristicPriceExtractor
from product_scraper.layers.meta_tags import MetaTagExtractor
from product_scraper.layers.normalization import Normalizer
from product_scraper.layers.structured_data import StructuredDataExtractor
from product_scraper.layers.url_validation import URLValidator, ValidatedURL
from product_scraper.models.product import ProductDraft, ProductExtraction
from product_scraper.utils.logger import StageLogger


class ProductScrapePipeline:
    """
    Turns one product-page URL into one ProductExtraction.
    
    The pipeline holds no per-scrape state: every call parses its own document
    into its own draft, so concurrent scrapes on one instance are safe.
    """
    
    def __init__(self, fetcher: Optional[PageFetcher] = None):
        self.logger = StageLogger("pipeline")
        self.validator = URLValidator()
        self.fetcher = fetcher or PageFetcher()
        self.structured_data = StructuredDataExtractor()
        self.meta_tags = MetaTagExtractor()
        self.heuristics = HeuristicPriceExtractor()
        self.categorizer = Categorizer()
        self.normalizer = Normalizer()
        self.extractors = [self.structured_data, self.meta_tags, self.heuristics]
    
    async def scrape(self, url: str) -> ProductExtraction:
        """
        Validate, fetch and extract a product page.
        
        Raises:
            InvalidURLError: if the URL does not parse
            BlockedError: if the site answers 403
            FetchFailedError: on any other fetch failure
        """
        self.logger.log_action("scrape", "started", url=url)
        
        target = self.validator.validate(url)
        html = await self.fetcher.fetch(target.url)
        product = self.extract(target, html)
        
        self.logger.log_action(
            "scrape",
            "completed",
            url=target.url,
            **product.model_dump(mode="json", by_alias=True)
        )
        return product
    
    def extract(self, target: Union[ValidatedURL, str], html: str) -> ProductExtraction:
        """
        Extract a product record from already-fetched HTML.
        
        Pure with respect to its inputs: identical HTML for the same URL
        always yields an identical record.
        """
        if isinstance(target, str):
            target = self.validator.validate(target)
        
        soup = BeautifulSoup(html, "lxml")
        draft = ProductDraft()
        
        for extractor in self.extractors:
            self._run_source(extractor.source, lambda: extractor.extract(soup, draft), target.url)
        
        self.categorizer.apply(target.url, draft)
        self._run_source(
            "site_name",
            lambda: self.meta_tags.fill_brand_from_site_name(soup, draft),
            target.url,
        )
        self.normalizer.apply(target.origin, draft)
        
        self.logger.log_extraction(
            source="pipeline",
            fields_present=draft.get_present_fields(),
            fields_missing=draft.get_missing_fields(),
            filled_by=dict(draft.sources),
            url=target.url
        )
        return draft.to_extraction()
    
    def _run_source(self, source: str, run, url: str) -> None:
        """Run one extraction source, absorbing its failure."""
        try:
            run()
        except Exception as e:
            self.logger.log_fallback(
                from_source=source,
                to_source="next_source",
                reason=f"{type(e).__name__}: {str(e)}",
                url=url
            )
