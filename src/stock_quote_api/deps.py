"""FastAPI dependency injection: app.state holds singletons; Depends() resolves them.

No external DI container. The lifespan (main.py) builds the database handle,
token codec, quote provider and notification publisher once and attaches them
to app.state; these getters hand them to routes. Services are built per
request around a fresh session.
"""
from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Request
from sqlmodel import Session

from stock_quote_api.auth import TokenCodec
from stock_quote_api.db.sessions import Database
from stock_quote_api.notifications import NotificationPublisher
from stock_quote_api.providers import StockProviderABC
from stock_quote_api.repositories import StockQueryRepository, UserRepository
from stock_quote_api.services import AuthService, StockService, UserService


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_session(
    database: Annotated[Database, Depends(get_database)],
) -> Generator[Session, None, None]:
    """One session per request, committed or rolled back when the request ends."""
    with database.session() as session:
        yield session


def get_token_codec(request: Request) -> TokenCodec:
    return request.app.state.token_codec


def get_stock_provider(request: Request) -> StockProviderABC:
    """Resolve the quote provider selected by STOCK_PROVIDER at startup."""
    return request.app.state.stock_provider


def get_publisher(request: Request) -> NotificationPublisher:
    return request.app.state.publisher


SessionDep = Annotated[Session, Depends(get_session)]


def get_auth_service(
    session: SessionDep,
    codec: Annotated[TokenCodec, Depends(get_token_codec)],
) -> AuthService:
    return AuthService(UserRepository(session), codec)


def get_user_service(session: SessionDep) -> UserService:
    return UserService(UserRepository(session))


def get_stock_service(
    session: SessionDep,
    provider: Annotated[StockProviderABC, Depends(get_stock_provider)],
    publisher: Annotated[NotificationPublisher, Depends(get_publisher)],
) -> StockService:
    return StockService(provider, StockQueryRepository(session), publisher)


# Type aliases for route injection
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
StockServiceDep = Annotated[StockService, Depends(get_stock_service)]
