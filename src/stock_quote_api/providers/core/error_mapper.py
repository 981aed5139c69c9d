"""Domain concept for mapping provider exceptions to API errors."""
import asyncio
from dataclasses import dataclass

import httpx

from stock_quote_api.errors import (ApiError, NotFoundError, UpstreamError,
                                    UpstreamTimeoutError)


@dataclass(frozen=True)
class ProviderErrorMapper:
    """Maps provider/backend exceptions to ApiErrors (status code + message).

    Inject this into services to centralize error mapping with appropriate
    resource and API names.
    """

    resource_name: str = "Resource"
    api_name: str = "API"

    def to_api_error(
        self,
        exc: Exception,
        symbol: str | None = None,
    ) -> ApiError:
        """Map a provider exception to an ApiError.

        Args:
            exc: The exception raised by the provider.
            symbol: Optional symbol/identifier to include in the message (e.g. "AAPL.US").
        """
        if isinstance(exc, ApiError):
            return exc
        if isinstance(exc, (ValueError, KeyError, TypeError)):
            return NotFoundError(self._not_found(symbol))
        if isinstance(exc, httpx.HTTPStatusError):
            status = exc.response.status_code
            if status == 404:
                return NotFoundError(self._not_found(symbol))
            if status >= 500:
                return UpstreamError(f"{self.api_name} error")
            return UpstreamError(f"{self.api_name} error", status_code=status)
        if isinstance(exc, (httpx.TimeoutException, asyncio.TimeoutError, TimeoutError)):
            detail = "Request timed out"
            if symbol is not None:
                detail = f"Request to {self.api_name} timed out for '{symbol}'"
            return UpstreamTimeoutError(detail)
        if isinstance(exc, (httpx.TransportError, OSError)):
            return UpstreamError(f"{self.api_name} unavailable")
        return ApiError()

    def raise_api_error(
        self,
        exc: Exception,
        symbol: str | None = None,
    ) -> None:
        """Map provider exception and raise it. Never returns."""
        raise self.to_api_error(exc, symbol=symbol) from exc

    def _not_found(self, symbol: str | None) -> str:
        if symbol is None:
            return f"{self.resource_name} not found"
        return f"{self.resource_name} '{symbol}' not found"
