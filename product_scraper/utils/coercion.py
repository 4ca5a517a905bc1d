"""
Helpers for the loosely-shaped values found in scraped markup.

JSON-LD lets publishers write most properties as a scalar, an object or a list,
so brand, image and offers all go through the same small set of coercions.
"""
import math
import re
from typing import Any, List, Optional

# Leading numeric prefix, e.g. "29.99 USD" -> "29.99"
_NUMERIC_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def as_list(value: Any) -> List[Any]:
    """Wrap a single value in a list; pass lists through; None becomes []."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def first_of(value: Any) -> Any:
    """Return the first element of a list, or the value itself if it is not a list."""
    if isinstance(value, list):
        return value[0] if value else None
    return value


def text_of(value: Any, field: Optional[str] = None) -> Optional[str]:
    """
    Resolve a string-or-object value to a string.
    
    "Acme" -> "Acme", {"name": "Acme"} -> "Acme" (for field="name").
    Anything else resolves to None.
    """
    if isinstance(value, dict):
        if field is None:
            return None
        value = value.get(field)
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return None


def parse_decimal(value: Any) -> Optional[float]:
    """
    Parse a price value into a non-negative float.
    
    Accepts numbers and strings with a leading numeric prefix. Returns None
    for anything that does not yield a finite, non-negative number.
    """
    if isinstance(value, bool):
        return None
    
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value)
        if not match:
            return None
        number = float(match.group(1))
    else:
        return None
    
    if math.isnan(number) or math.isinf(number) or number < 0:
        return None
    return number
