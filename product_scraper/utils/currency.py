"""
Currency helpers used by the collection front-end to show prices in USD.
Rates are fixed approximations, expressed as units of currency per 1 USD.
"""
from typing import Dict

EXCHANGE_RATES: Dict[str, float] = {
    "USD": 1,
    "EUR": 0.92,
    "GBP": 0.79,
    "CAD": 1.36,
    "AUD": 1.52,
    "JPY": 149.5,
}

CURRENCY_SYMBOLS: Dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "CAD": "CA$",
    "AUD": "A$",
    "JPY": "¥",
}


def convert_to_usd(amount: float, from_currency: str) -> float:
    """Convert an amount to USD. Unknown currencies are returned unchanged."""
    if from_currency == "USD":
        return amount
    
    rate = EXCHANGE_RATES.get(from_currency)
    if not rate:
        return amount
    
    return amount / rate


def get_currency_symbol(currency: str) -> str:
    """Display symbol for a currency code, falling back to the code itself."""
    return CURRENCY_SYMBOLS.get(currency, currency)


def is_supported_currency(currency: str) -> bool:
    return currency in EXCHANGE_RATES


def format_usd_conversion(amount: float) -> str:
    return f"≈ ${amount:.2f}"
