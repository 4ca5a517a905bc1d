"""
Page fetcher for the Product Scraper service.
Issues the single GET per scrape and classifies the response.
"""
from typing import Optional

import httpx

from product_scraper.config import config
from product_scraper.models.errors import BlockedError, FetchFailedError
from product_scraper.utils.logger import StageLogger

BLOCKED_MESSAGE = (
    "Unable to access this website. The site may be blocking automated requests. "
    "Please try manually entering the product details."
)
FETCH_FAILED_MESSAGE = "Failed to fetch the product page"


class PageFetcher:
    """
    Fetches product pages with browser-like headers.
    
    Many storefronts reject requests that do not look like a desktop browser,
    so the header set below is kept close to what Chrome sends on navigation.
    No retries: a failed fetch ends the scrape.
    """
    
    def __init__(
        self,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.transport = transport
        self.logger = StageLogger("page_fetcher")
    
    async def fetch(self, url: str) -> str:
        """
        GET the page and return its body as text.
        
        Raises:
            BlockedError: on HTTP 403
            FetchFailedError: on any other non-2xx status, or a network failure
        """
        self.logger.log_action("fetch_html", "started", url=url)
        
        try:
            async with self._client() as client:
                response = await client.get(url, headers=self._get_headers())
        except httpx.HTTPError as e:
            self.logger.log_error(
                f"Failed to fetch URL: {str(e)}",
                error_type=type(e).__name__,
                url=url
            )
            raise FetchFailedError(FETCH_FAILED_MESSAGE) from e
        
        if response.status_code == 403:
            self.logger.log_http_fetch(url, response.status_code, "blocked")
            raise BlockedError(BLOCKED_MESSAGE)
        
        if not response.is_success:
            self.logger.log_http_fetch(url, response.status_code, "failed")
            raise FetchFailedError(FETCH_FAILED_MESSAGE, status_code=response.status_code)
        
        html = response.text
        self.logger.log_http_fetch(url, response.status_code, "ok", content_length=len(html))
        return html
    
    def _client(self) -> httpx.AsyncClient:
        kwargs = {"follow_redirects": True}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        if self.transport is not None:
            kwargs["transport"] = self.transport
        return httpx.AsyncClient(**kwargs)
    
    def _get_headers(self) -> dict:
        """Get request headers mimicking a desktop browser navigation."""
        return {
            "User-Agent": config.USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.5",
            "Accept-Encoding": "gzip, deflate, br",
            "Connection": "keep-alive",
            "Upgrade-Insecure-Requests": "1",
            "Sec-Fetch-Dest": "document",
            "Sec-Fetch-Mode": "navigate",
            "Sec-Fetch-Site": "none",
            "Cache-Control": "max-age=0",
        }
