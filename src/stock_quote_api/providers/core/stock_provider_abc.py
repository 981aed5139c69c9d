"""Abstract base class for stock quote providers."""
from abc import ABC, abstractmethod

from stock_quote_api.schemas import StockQuote


class StockProviderABC(ABC):
    """Base interface for all stock quote providers.

    Implementations raise ValueError when a symbol is unknown or has no data,
    and let transport errors (httpx, timeouts) propagate; the service layer
    maps both to HTTP responses.
    """

    name: str = "provider"

    @abstractmethod
    async def get_quote(self, symbol: str) -> StockQuote:
        """Fetch the latest quote for a symbol.

        Args:
            symbol: The ticker in the provider's notation (e.g. "AAPL.US").

        Returns:
            A StockQuote with open/high/low/close for the latest session.
        """

    async def close(self) -> None:
        """Clean up resources (connections, clients).

        Override in subclasses if cleanup is needed.
        """

    async def __aenter__(self) -> "StockProviderABC":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        """Async context manager exit - calls close()."""
        await self.close()
