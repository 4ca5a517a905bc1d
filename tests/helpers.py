"""HTML and HTTP builders shared by the test modules."""
import json

import httpx

from product_scraper.adapters.page_fetcher import PageFetcher


def jsonld(data) -> str:
    """Render a JSON-LD script block."""
    return f'<script type="application/ld+json">{json.dumps(data)}</script>'


def meta(attr: str, key: str, content: str) -> str:
    return f'<meta {attr}="{key}" content="{content}">'


def page(head: str = "", body: str = "") -> str:
    return f"<html><head>{head}</head><body>{body}</body></html>"


def html_handler(html: str, status_code: int = 200):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=html)
    return handler


def mock_fetcher(handler) -> PageFetcher:
    """PageFetcher whose requests are answered by handler instead of the network."""
    return PageFetcher(transport=httpx.MockTransport(handler))
