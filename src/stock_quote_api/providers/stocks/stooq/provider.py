"""Stooq quote provider (CSV over HTTP)."""
import csv
import io
import logging
from urllib.parse import quote

import httpx

from stock_quote_api.providers.core import (StockProviderABC,
                                            normalize_stock_symbol,
                                            parse_price)
from stock_quote_api.schemas import StockQuote

logger = logging.getLogger(__name__)

# s=symbol d2=date t2=time o h l c v n=name
STOOQ_FIELDS = "sd2t2ohlcvn"
REQUIRED_COLUMNS = ("Symbol", "Open", "High", "Low", "Close")


def parse_stooq_csv(text: str) -> StockQuote:
    """Parse a one-row Stooq CSV response (header + values).

    Raises:
        ValueError: when the response has no data row, lacks a column, or
            Stooq reports "N/D" (unknown symbol / no session) for a price.
    """
    rows = list(csv.DictReader(io.StringIO(text.strip())))
    if not rows:
        raise ValueError("Stock quote response is empty")
    row = rows[0]
    missing = [col for col in REQUIRED_COLUMNS if not row.get(col)]
    if missing:
        raise ValueError(f"Stock quote response lacks {', '.join(missing)}")

    prices = {col.lower(): parse_price(row[col]) for col in REQUIRED_COLUMNS[1:]}
    if any(value is None for value in prices.values()):
        raise ValueError(f"Stock '{row['Symbol']}' not found")

    def _optional(col: str) -> str | None:
        value = (row.get(col) or "").strip()
        return value if value and value != "N/D" else None

    return StockQuote(
        symbol=row["Symbol"].strip(),
        name=_optional("Name"),
        date=_optional("Date"),
        time=_optional("Time"),
        volume=parse_price(row.get("Volume")),
        **prices,
    )


class StooqProvider(StockProviderABC):
    """Quote provider backed by stooq.com's CSV endpoint.

    Symbols use Stooq notation with a market suffix, e.g. "AAPL.US".
    No API key required.
    """

    name = "stooq"
    BASE_URL = "https://stooq.com/q/l/"

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the Stooq provider.

        Args:
            base_url: Endpoint returning the CSV quote. Defaults to BASE_URL.
            timeout: Request timeout in seconds.
            client: Optional preconfigured client (tests pass a MockTransport one).
        """
        self._base_url = base_url or self.BASE_URL
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def get_quote(self, symbol: str) -> StockQuote:
        """Fetch the latest quote for a Stooq symbol."""
        sym = normalize_stock_symbol(symbol)
        # "h" (header row) is a bare flag, so the query string is built by hand
        url = f"{self._base_url}?s={quote(sym.lower(), safe='.')}&f={STOOQ_FIELDS}&h&e=csv"
        response = await self._client.get(url)
        response.raise_for_status()
        return parse_stooq_csv(response.text)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()
