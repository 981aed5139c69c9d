"""Shared utilities for stock quote providers."""

DECIMALS = 2
MISSING = "N/D"


def normalize_stock_symbol(symbol: str) -> str:
    """Normalize a stock symbol (trimmed, uppercase)."""
    return symbol.strip().upper()


def round2(x: float | None) -> float | None:
    """Round a value to 2 decimal places; preserve None."""
    if x is None:
        return None
    return round(float(x), DECIMALS)


def parse_price(raw: str | None) -> float | None:
    """Parse a provider price field; "N/D" and blanks become None."""
    if raw is None:
        return None
    raw = raw.strip()
    if not raw or raw == MISSING:
        return None
    return round2(float(raw))
