"""Main module for the stock quote API."""
import logging
import subprocess
import sys
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI

from stock_quote_api.auth import AuthGate, TokenCodec
from stock_quote_api.db import Database, run_seeders
from stock_quote_api.notifications import (MessageQueue, NotificationPublisher,
                                           TemplateRenderer)
from stock_quote_api.providers import create_stock_provider
from stock_quote_api.responses import register_exception_handlers
from stock_quote_api.routers import auth_router, stocks_router, users_router
from stock_quote_api.settings import Settings, get_settings
from stock_quote_api.utils import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI):
    """Compose the application at startup; release resources on shutdown."""
    settings: Settings = fastapi_app.state.settings

    database = Database(settings.database_url, echo=settings.SQL_ECHO)
    database.init_db()
    with database.session() as session:
        run_seeders(session, settings)

    token_codec = TokenCodec(
        settings.JWT_SECRET,
        settings.JWT_EXPIRATION,
        algorithm=settings.JWT_ALGORITHM,
    )
    stock_provider = create_stock_provider(settings)
    queue = MessageQueue(
        settings.broker_url, enabled=settings.RMQ_ENABLED, timeout=settings.RMQ_TIMEOUT
    )
    publisher = NotificationPublisher(
        queue,
        TemplateRenderer(),
        queue_name=settings.EMAIL_QUEUE,
        from_email=settings.MAILER_FROM,
        from_name=settings.MAILER_FROM_NAME,
    )

    fastapi_app.state.database = database
    fastapi_app.state.token_codec = token_codec
    fastapi_app.state.auth_gate = AuthGate(token_codec)
    fastapi_app.state.stock_provider = stock_provider
    fastapi_app.state.publisher = publisher
    logger.info(
        "Started with provider=%s, notifications %s",
        stock_provider.name, "enabled" if queue.enabled else "disabled",
    )

    yield

    # Close provider resources (e.g. httpx clients)
    try:
        await stock_provider.close()
    except Exception as exc:  # pylint: disable=broad-except
        logger.warning("Error closing provider %s: %s", type(stock_provider).__name__, exc)
    database.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI app; components are created when its lifespan starts."""
    settings = settings or get_settings()
    fastapi_app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Stock quotes with JWT login, query history and email notifications",
        version="0.1.0",
        lifespan=lifespan,
    )
    fastapi_app.state.settings = settings
    register_exception_handlers(fastapi_app)

    fastapi_app.include_router(auth_router)
    fastapi_app.include_router(users_router)
    fastapi_app.include_router(stocks_router)

    @fastapi_app.get("/")
    def health():
        """Return health check status."""
        return {"status": "ok"}

    return fastapi_app


app = create_app()


def run():
    """Run the server (uvicorn). Use for `stock-quote-api`."""
    configure_logging(get_settings().LOG_LEVEL)
    uvicorn.run("stock_quote_api.main:app", host="0.0.0.0", port=8000)


def run_dev():
    """Run the development server with Postgres and RabbitMQ running via Docker."""
    project_root = Path(__file__).resolve().parent.parent.parent
    try:
        subprocess.run(
            ["docker", "compose", "up", "-d", "postgres", "rabbitmq"],
            cwd=project_root,
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        print("Failed to start Postgres/RabbitMQ:", e.stderr or e.stdout, file=sys.stderr)
        sys.exit(1)
    configure_logging(get_settings().LOG_LEVEL)
    uvicorn.run("stock_quote_api.main:app", host="127.0.0.1", port=8000, reload=True)
