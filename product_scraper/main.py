"""
Product Scraper - FastAPI Application
Main entry point with REST API endpoints.
"""
from typing import Optional

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from product_scraper import __version__
from product_scraper.config import config
from product_scraper.layers.assembly import ProductScrapePipeline
from product_scraper.models.errors import ScrapeError, ScrapeErrorKind, ScrapeFailure
from product_scraper.models.product import ProductExtraction
from product_scraper.utils.currency import (
    convert_to_usd,
    format_usd_conversion,
    get_currency_symbol,
    is_supported_currency,
)
from product_scraper.utils.logger import get_logger, set_trace_id


# Initialize FastAPI app
app = FastAPI(
    title="Product Scraper",
    description="Extracts product name, brand, price, image and category from a product page URL",
    version=__version__,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

pipeline = ProductScrapePipeline()

logger = get_logger("main")


# Request/Response models
class ScrapeRequest(BaseModel):
    """Request model for product scraping."""
    url: Optional[str] = None


class CurrencyConversionResponse(BaseModel):
    """Response model for USD conversion."""
    amount: float
    currency: str
    symbol: str
    supported: bool
    usd_amount: float
    display: str


def _failure_status(error: ScrapeError) -> int:
    """HTTP status for a terminal scrape failure."""
    if error.kind is ScrapeErrorKind.INVALID_URL:
        return 400
    if error.kind is ScrapeErrorKind.BLOCKED:
        return 403
    return error.status_code or 502


# API Routes
@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.post(
    "/api/scrape",
    response_model=ProductExtraction,
    responses={400: {"model": ScrapeFailure}, 403: {"model": ScrapeFailure}, 502: {"model": ScrapeFailure}},
)
async def scrape_product(request: ScrapeRequest):
    """
    Scrape product metadata from a product page.
    
    The result is advisory: every field stays user-editable downstream.
    A 403 from the site comes back with blocked=true so the caller can
    offer manual entry instead.
    """
    trace_id = set_trace_id()
    
    logger.info("scrape_request", url=request.url, trace_id=trace_id)
    
    try:
        return await pipeline.scrape(request.url or "")
    except ScrapeError as e:
        logger.warning(
            "scrape_failed",
            kind=e.kind.value,
            status_code=e.status_code,
            blocked=e.blocked,
            url=request.url
        )
        return JSONResponse(
            status_code=_failure_status(e),
            content=e.to_failure(trace_id).model_dump(mode="json"),
        )
    except Exception as e:
        logger.error("scrape_error", error=str(e), url=request.url)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to scrape product information", "trace_id": trace_id},
        )


@app.get("/api/currency/convert", response_model=CurrencyConversionResponse)
async def convert_currency(
    amount: float = Query(..., ge=0, description="Amount in the source currency"),
    currency: str = Query("USD", description="ISO currency code"),
):
    """Approximate USD value of a price, for display next to the listed price."""
    code = currency.upper()
    usd_amount = convert_to_usd(amount, code)
    return CurrencyConversionResponse(
        amount=amount,
        currency=code,
        symbol=get_currency_symbol(code),
        supported=is_supported_currency(code),
        usd_amount=usd_amount,
        display=format_usd_conversion(usd_amount),
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
