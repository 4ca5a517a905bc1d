"""Utils package initialization."""
from product_scraper.utils.logger import get_logger, StageLogger, set_trace_id, get_trace_id

__all__ = ["get_logger", "StageLogger", "set_trace_id", "get_trace_id"]
