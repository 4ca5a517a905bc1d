"""
URL validation for the Product Scraper service.
First stage of the pipeline: nothing downstream runs for a URL that fails here.
"""
from dataclasses import dataclass
from typing import Annotated

from pydantic import AnyUrl, TypeAdapter, UrlConstraints, ValidationError

from product_scraper.models.errors import InvalidURLError
from product_scraper.utils.logger import StageLogger

# Like HttpUrl, minus its 2083-character cap
_http_url = TypeAdapter(
    Annotated[AnyUrl, UrlConstraints(allowed_schemes=["http", "https"], host_required=True, max_length=None)]
)

DEFAULT_PORTS = {"http": 80, "https": 443}


@dataclass(frozen=True)
class ValidatedURL:
    """A URL that parsed strictly, plus the origin used to absolutize relative links."""
    url: str
    origin: str


class URLValidator:
    """Strict URL parsing with origin extraction."""
    
    def __init__(self):
        self.logger = StageLogger("url_validation")
    
    def validate(self, raw_url: str) -> ValidatedURL:
        """
        Parse a user-supplied URL.
        
        Raises:
            InvalidURLError: if the string is empty or not an absolute http(s) URL
        """
        if not raw_url or not raw_url.strip():
            raise InvalidURLError("URL is required")
        
        url = raw_url.strip()
        try:
            parsed = _http_url.validate_python(url)
        except ValidationError as e:
            self.logger.log_decision(
                decision="reject_url",
                reason=e.errors()[0].get("msg", "invalid url") if e.errors() else "invalid url",
                url=url
            )
            raise InvalidURLError("Invalid URL format") from e
        
        origin = self._origin_of(parsed)
        self.logger.log_decision(decision="accept_url", reason="strict_parse_ok", url=url, origin=origin)
        return ValidatedURL(url=url, origin=origin)
    
    def _origin_of(self, parsed: AnyUrl) -> str:
        """scheme://host[:port], omitting the port when it is the scheme default."""
        origin = f"{parsed.scheme}://{parsed.host}"
        if parsed.port is not None and parsed.port != DEFAULT_PORTS.get(parsed.scheme):
            origin += f":{parsed.port}"
        return origin
