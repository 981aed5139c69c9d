import pytest
from fastapi.testclient import TestClient

from stock_quote_api.deps import get_publisher, get_stock_provider
from stock_quote_api.main import create_app
from stock_quote_api.providers import StockProviderABC
from stock_quote_api.providers.core import normalize_stock_symbol
from stock_quote_api.schemas import StockQuote
from stock_quote_api.settings import Settings

DEFAULT_EMAIL = "user@example.com"
DEFAULT_PASSWORD = "secret"


class FakeStockProvider(StockProviderABC):
    """Returns a fixed quote for any symbol, or raises `error` when set."""

    name = "fake"

    def __init__(self):
        self.calls = []
        self.error = None
        self.closed = False

    async def get_quote(self, symbol):
        self.calls.append(symbol)
        if self.error is not None:
            raise self.error
        return StockQuote(
            symbol=normalize_stock_symbol(symbol),
            name="APPLE",
            date="2024-05-10",
            time="22:00:00",
            open=184.9,
            high=185.09,
            low=182.13,
            close=183.05,
            volume=50759496,
        )

    async def close(self):
        self.closed = True


class FakePublisher:
    def __init__(self, result=True):
        self.result = result
        self.sent = []

    def notify(self, recipient, subject, data, template="stock_quote"):
        self.sent.append((recipient, subject, dict(data), template))
        return self.result


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite://",
        JWT_SECRET="test-secret",
        JWT_EXPIRATION=3600,
        DEFAULT_USERNAME=DEFAULT_EMAIL,
        DEFAULT_PASSWORD=DEFAULT_PASSWORD,
        RMQ_ENABLED=False,
        MAILER_ENABLED=False,
    )


@pytest.fixture
def provider():
    return FakeStockProvider()


@pytest.fixture
def publisher():
    return FakePublisher()


@pytest.fixture
def app(settings, provider, publisher):
    application = create_app(settings)
    application.dependency_overrides[get_stock_provider] = lambda: provider
    application.dependency_overrides[get_publisher] = lambda: publisher
    return application


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def token(client):
    resp = client.post("/auth/login", json={"email": DEFAULT_EMAIL, "password": DEFAULT_PASSWORD})
    assert resp.status_code == 200
    return resp.json()["data"]["token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}
