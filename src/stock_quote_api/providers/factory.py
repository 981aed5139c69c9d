"""Select the configured quote provider."""
from stock_quote_api.providers.core import StockProviderABC
from stock_quote_api.providers.stocks import StooqProvider, YFinanceProvider
from stock_quote_api.settings import Settings


def create_stock_provider(settings: Settings) -> StockProviderABC:
    """Build the provider named by STOCK_PROVIDER ("stooq" or "yfinance")."""
    name = settings.STOCK_PROVIDER.lower()
    if name == "stooq":
        return StooqProvider(base_url=settings.STOCK_API_URL, timeout=settings.STOCK_API_TIMEOUT)
    if name == "yfinance":
        return YFinanceProvider()
    raise ValueError(f"Unknown stock provider: {settings.STOCK_PROVIDER}")
