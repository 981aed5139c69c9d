"""Stock quote providers."""
from stock_quote_api.providers.stocks.stooq.provider import StooqProvider
from stock_quote_api.providers.stocks.yfinance.y_finance_provider import \
    YFinanceProvider

__all__ = ["StooqProvider", "YFinanceProvider"]
