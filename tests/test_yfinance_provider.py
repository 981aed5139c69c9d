import asyncio

import pandas as pd
import pytest

from stock_quote_api.providers.stocks.yfinance import y_finance_provider
from stock_quote_api.providers.stocks.yfinance.y_finance_provider import (
    YFinanceProvider, to_yahoo_symbol)


class FakeTicker:
    frames = {}

    def __init__(self, symbol):
        self.symbol = symbol

    def history(self, period, interval):
        return self.frames.get(self.symbol, pd.DataFrame())


@pytest.fixture
def fake_ticker(monkeypatch):
    monkeypatch.setattr(y_finance_provider.yf, "Ticker", FakeTicker)
    FakeTicker.frames = {}
    return FakeTicker


@pytest.mark.parametrize("symbol, expected", [
    ("AAPL.US", "AAPL"),
    ("aapl.us", "AAPL"),
    ("MSFT", "MSFT"),
    ("VOD.L", "VOD.L"),
])
def test_to_yahoo_symbol(symbol, expected):
    assert to_yahoo_symbol(symbol) == expected


def test_get_quote_keeps_requested_symbol(fake_ticker):
    fake_ticker.frames["AAPL"] = pd.DataFrame(
        {
            "Open": [184.904], "High": [185.091], "Low": [182.13],
            "Close": [183.05], "Volume": [50759496],
        },
        index=pd.DatetimeIndex(["2024-05-10"]),
    )

    quote = asyncio.run(YFinanceProvider().get_quote("aapl.us"))

    assert quote.symbol == "AAPL.US"
    assert quote.date == "2024-05-10"
    assert quote.open == 184.9
    assert quote.high == 185.09
    assert quote.close == 183.05


def test_get_quote_without_data(fake_ticker):
    with pytest.raises(ValueError):
        asyncio.run(YFinanceProvider().get_quote("NOPE.US"))
