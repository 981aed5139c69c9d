"""Stock quote providers.

This module provides a unified interface (StockProviderABC) for fetching
the latest quote of a stock from an external source:

- StooqProvider: CSV quotes from stooq.com (default, symbols like "AAPL.US")
- YFinanceProvider: Yahoo Finance via the yfinance library

Example:
    async with StooqProvider() as provider:
        quote = await provider.get_quote("AAPL.US")
        print(f"{quote.symbol}: {quote.close}")
"""
from stock_quote_api.providers.core import (ProviderErrorMapper,
                                            StockProviderABC)
from stock_quote_api.providers.factory import create_stock_provider
from stock_quote_api.providers.stocks import StooqProvider, YFinanceProvider

__all__ = [
    "ProviderErrorMapper",
    "StockProviderABC",
    "StooqProvider",
    "YFinanceProvider",
    "create_stock_provider",
]
