"""Tests for the page fetcher's request headers and response classification."""
import httpx
import pytest

from product_scraper.models.errors import BlockedError, FetchFailedError, ScrapeErrorKind
from tests.helpers import html_handler, mock_fetcher

URL = "https://store.example/p/1"


async def test_success_returns_body():
    fetcher = mock_fetcher(html_handler("<html><title>Hi</title></html>"))
    assert await fetcher.fetch(URL) == "<html><title>Hi</title></html>"


async def test_sends_browser_like_headers():
    seen = {}
    
    def handler(request: httpx.Request) -> httpx.Response:
        seen.update(request.headers)
        return httpx.Response(200, text="ok")
    
    await mock_fetcher(handler).fetch(URL)
    
    assert seen["user-agent"].startswith("Mozilla/5.0")
    assert "text/html" in seen["accept"]
    assert seen["accept-language"] == "en-US,en;q=0.5"
    assert seen["sec-fetch-mode"] == "navigate"
    assert seen["sec-fetch-dest"] == "document"
    assert seen["cache-control"] == "max-age=0"
    assert seen["upgrade-insecure-requests"] == "1"


async def test_403_is_blocked():
    with pytest.raises(BlockedError) as exc_info:
        await mock_fetcher(html_handler("denied", status_code=403)).fetch(URL)
    error = exc_info.value
    assert error.kind is ScrapeErrorKind.BLOCKED
    assert error.blocked is True
    assert error.status_code == 403
    assert "manually" in error.message


@pytest.mark.parametrize("status_code", [404, 500, 503])
async def test_other_errors_carry_status_code(status_code):
    with pytest.raises(FetchFailedError) as exc_info:
        await mock_fetcher(html_handler("nope", status_code=status_code)).fetch(URL)
    assert exc_info.value.kind is ScrapeErrorKind.FETCH_FAILED
    assert exc_info.value.status_code == status_code
    assert exc_info.value.blocked is False


async def test_network_failure_has_no_status_code():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("name resolution failed", request=request)
    
    with pytest.raises(FetchFailedError) as exc_info:
        await mock_fetcher(handler).fetch(URL)
    assert exc_info.value.status_code is None


async def test_redirects_are_followed():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "https://store.example/new"})
        return httpx.Response(200, text="moved here")
    
    assert await mock_fetcher(handler).fetch("https://store.example/old") == "moved here"
