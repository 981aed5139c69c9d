"""Database models for the stock quote service.

Users and their stock query history are persisted. Quotes themselves are
fetched on demand from the quote provider.
"""
from datetime import datetime

from sqlmodel import Field, SQLModel

from stock_quote_api.utils import utcnow


class User(SQLModel, table=True):
    """Account used for login; owns a stock query history."""

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(
        default_factory=utcnow, sa_column_kwargs={"onupdate": utcnow}
    )


class StockQuery(SQLModel, table=True):
    """One successful quote lookup made by a user."""

    __tablename__ = "stock_queries"

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True, ondelete="CASCADE")
    symbol: str = Field(max_length=20)
    name: str | None = Field(default=None, max_length=100)
    open: float | None = None
    high: float | None = None
    low: float | None = None
    close: float | None = None
    created_at: datetime = Field(default_factory=utcnow, index=True)
    updated_at: datetime = Field(
        default_factory=utcnow, sa_column_kwargs={"onupdate": utcnow}
    )
