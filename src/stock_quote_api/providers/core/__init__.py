"""Core provider abstractions."""
from stock_quote_api.providers.core.error_mapper import ProviderErrorMapper
from stock_quote_api.providers.core.stock_provider_abc import StockProviderABC
from stock_quote_api.providers.core.utils import (normalize_stock_symbol,
                                                  parse_price, round2)

__all__ = [
    "ProviderErrorMapper",
    "StockProviderABC",
    "normalize_stock_symbol",
    "parse_price",
    "round2",
]
