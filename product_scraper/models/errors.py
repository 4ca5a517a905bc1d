"""
Error taxonomy for the Product Scraper service.

Only these errors abort a scrape. Anything going wrong inside a single
extraction source is absorbed by the pipeline instead.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class ScrapeErrorKind(str, Enum):
    """Kinds of terminal scrape failure."""
    INVALID_URL = "invalid_url"
    BLOCKED = "blocked"
    FETCH_FAILED = "fetch_failed"


class ScrapeError(Exception):
    """Base class for failures that end a scrape."""
    
    kind: ScrapeErrorKind = ScrapeErrorKind.FETCH_FAILED
    
    def __init__(self, message: str, status_code: Optional[int] = None, blocked: bool = False):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.blocked = blocked
    
    def to_failure(self, trace_id: Optional[str] = None) -> "ScrapeFailure":
        return ScrapeFailure(
            error=self.message,
            kind=self.kind,
            blocked=self.blocked,
            status_code=self.status_code,
            trace_id=trace_id,
        )


class InvalidURLError(ScrapeError):
    """The input could not be parsed as an absolute http(s) URL."""
    kind = ScrapeErrorKind.INVALID_URL


class BlockedError(ScrapeError):
    """The site answered 403: it is rejecting automated access."""
    kind = ScrapeErrorKind.BLOCKED
    
    def __init__(self, message: str):
        super().__init__(message, status_code=403, blocked=True)


class FetchFailedError(ScrapeError):
    """Non-2xx response other than 403, or a network-level failure (no status code)."""
    kind = ScrapeErrorKind.FETCH_FAILED


class ScrapeFailure(BaseModel):
    """Error body returned to callers of the scrape endpoint."""
    error: str
    kind: ScrapeErrorKind
    blocked: bool = False
    status_code: Optional[int] = None
    trace_id: Optional[str] = None
