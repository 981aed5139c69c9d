"""Yahoo Finance quote provider for stocks."""
import asyncio

import yfinance as yf

from stock_quote_api.providers.core import (StockProviderABC,
                                            normalize_stock_symbol, round2)
from stock_quote_api.schemas import StockQuote

# Stooq-style market suffixes that Yahoo does not use for the home market
_US_SUFFIX = ".US"


def to_yahoo_symbol(symbol: str) -> str:
    """Map "AAPL.US" to Yahoo's "AAPL"; other symbols pass through uppercased."""
    sym = normalize_stock_symbol(symbol)
    if sym.endswith(_US_SUFFIX):
        return sym[: -len(_US_SUFFIX)]
    return sym


class YFinanceProvider(StockProviderABC):
    """Quote provider for stocks via Yahoo Finance.

    Uses the yfinance library; its calls are synchronous so they run in a
    worker thread. The returned quote keeps the symbol as requested so history
    rows match what the caller asked for.
    """

    name = "yfinance"

    def _fetch_quote_sync(self, symbol: str) -> StockQuote:
        """Fetch the latest daily bar synchronously (run in thread)."""
        ticker = yf.Ticker(to_yahoo_symbol(symbol))
        try:
            df = ticker.history(period="1d", interval="1d")
        except Exception as e:
            raise ValueError(f"Failed to fetch quote for '{symbol}': {e}") from e
        if df is None or df.empty:
            raise ValueError(f"Stock '{symbol}' not found or has no price data")

        ts = df.index[-1]
        row = df.iloc[-1]
        if row[["Open", "High", "Low", "Close"]].isna().any():
            raise ValueError(f"Stock '{symbol}' has incomplete price data")
        volume = row.get("Volume")
        return StockQuote(
            symbol=symbol,
            name=None,
            date=ts.strftime("%Y-%m-%d"),
            time=ts.strftime("%H:%M:%S"),
            open=round2(float(row["Open"])),
            high=round2(float(row["High"])),
            low=round2(float(row["Low"])),
            close=round2(float(row["Close"])),
            volume=round2(float(volume)) if volume is not None else None,
        )

    async def get_quote(self, symbol: str) -> StockQuote:
        """Fetch the latest quote for a stock symbol."""
        sym = normalize_stock_symbol(symbol)
        return await asyncio.to_thread(self._fetch_quote_sync, sym)
