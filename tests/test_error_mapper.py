import asyncio

import httpx
import pytest

from stock_quote_api.errors import (ApiError, NotFoundError, UpstreamError,
                                    UpstreamTimeoutError)
from stock_quote_api.providers import ProviderErrorMapper

mapper = ProviderErrorMapper("Stock", "Stock API")


def status_error(code):
    request = httpx.Request("GET", "https://stooq.test/q/l/")
    response = httpx.Response(code, request=request)
    return httpx.HTTPStatusError("boom", request=request, response=response)


@pytest.mark.parametrize("exc", [ValueError("x"), KeyError("x"), TypeError("x")])
def test_bad_data_is_not_found(exc):
    err = mapper.to_api_error(exc, symbol="AAPL.US")

    assert isinstance(err, NotFoundError)
    assert err.status_code == 404
    assert err.message == "Stock 'AAPL.US' not found"


def test_upstream_404_is_not_found():
    assert mapper.to_api_error(status_error(404)).message == "Stock not found"


def test_upstream_5xx_is_bad_gateway():
    err = mapper.to_api_error(status_error(500))

    assert isinstance(err, UpstreamError)
    assert err.status_code == 502
    assert err.message == "Stock API error"


@pytest.mark.parametrize("exc", [httpx.ConnectTimeout("t"), asyncio.TimeoutError(), TimeoutError()])
def test_timeouts(exc):
    err = mapper.to_api_error(exc, symbol="AAPL.US")

    assert isinstance(err, UpstreamTimeoutError)
    assert err.status_code == 504


def test_transport_error_is_unavailable():
    err = mapper.to_api_error(httpx.ConnectError("refused"))

    assert err.status_code == 502
    assert err.message == "Stock API unavailable"


def test_api_errors_pass_through():
    original = NotFoundError("gone")

    assert mapper.to_api_error(original) is original


def test_raise_api_error_chains_cause():
    cause = ValueError("x")

    with pytest.raises(ApiError) as exc_info:
        mapper.raise_api_error(cause, symbol="X")
    assert exc_info.value.__cause__ is cause
