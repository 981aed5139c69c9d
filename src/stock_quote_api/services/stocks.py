"""Stock lookups: fetch a quote, record it, notify the caller by email."""
import asyncio
import logging

import httpx
from sqlalchemy.exc import IntegrityError

from stock_quote_api.auth import Identity
from stock_quote_api.db.models import StockQuery
from stock_quote_api.errors import UnknownUserError, ValidationFailedError
from stock_quote_api.notifications import NotificationPublisher
from stock_quote_api.providers import ProviderErrorMapper, StockProviderABC
from stock_quote_api.repositories import StockQueryRepository
from stock_quote_api.schemas import StockQuote

logger = logging.getLogger(__name__)

QUOTE_EMAIL_SUBJECT = "Stock Quote Information"

# Exceptions from providers we map to API errors; all others propagate.
_PROVIDER_EXCEPTIONS: tuple[type[Exception], ...] = (
    ValueError,
    KeyError,
    TypeError,
    TimeoutError,
    OSError,
    asyncio.TimeoutError,
    httpx.HTTPError,
)


class StockService:
    """Quote lookups for an authenticated caller."""

    def __init__(
        self,
        provider: StockProviderABC,
        history: StockQueryRepository,
        publisher: NotificationPublisher,
        error_mapper: ProviderErrorMapper | None = None,
    ) -> None:
        self._provider = provider
        self._history = history
        self._publisher = publisher
        self._error_mapper = error_mapper or ProviderErrorMapper("Stock", "Stock API")

    async def lookup(self, identity: Identity, symbol: str | None) -> StockQuote:
        """Fetch the quote, persist it for the caller and queue the quote email.

        The email is best effort: the quote is returned whether or not it was
        queued.
        """
        symbol = (symbol or "").strip()
        if not symbol:
            raise ValidationFailedError("Stock symbol is required")

        try:
            quote = await self._provider.get_quote(symbol)
        except _PROVIDER_EXCEPTIONS as e:
            logger.info("Quote lookup for %s failed: %s", symbol, e)
            self._error_mapper.raise_api_error(e, symbol=symbol)

        try:
            # Session I/O blocks; keep it off the event loop
            await asyncio.to_thread(self._history.create, identity.user_id, quote)
        except IntegrityError as e:
            # The token outlived its user
            logger.warning("Not recording %s for missing user %s", symbol, identity.user_id)
            raise UnknownUserError() from e

        if identity.email:
            # Broker publish blocks; keep it off the event loop
            await asyncio.to_thread(
                self._publisher.notify,
                identity.email,
                QUOTE_EMAIL_SUBJECT,
                quote.model_dump(),
            )
        return quote

    def history(self, user_id: int) -> list[StockQuery]:
        return self._history.get_user_history(user_id)
