"""Pydantic schemas for API payloads, provider results and queue jobs."""
from datetime import datetime
from typing import Annotated, Generic, TypeVar

from pydantic import (AfterValidator, BaseModel, ConfigDict, EmailStr, Field,
                      StringConstraints)

T = TypeVar("T")


def normalize_email(email: str) -> str:
    """Canonical form used to store and look up accounts."""
    return email.strip().lower()


# Accounts are keyed by the normalized address on every path
AccountEmail = Annotated[EmailStr, AfterValidator(normalize_email)]


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope returned by every JSON endpoint."""

    success: bool = True
    message: str | None = None
    data: T | None = None


class ErrorResponse(BaseModel):
    """Failure envelope; error_code repeats the HTTP status."""

    success: bool = False
    message: str
    error_code: int


class StockQuote(BaseModel):
    """A single quote as returned by a quote provider."""

    symbol: str
    name: str | None = None
    date: str | None = None
    time: str | None = None
    open: float
    high: float
    low: float
    close: float
    volume: float | None = None


class StockQueryRead(BaseModel):
    """A persisted quote lookup."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    symbol: str
    name: str | None = None
    open: float | None = None
    high: float | None = None
    low: float | None = None
    close: float | None = None
    created_at: datetime
    updated_at: datetime


class UserRead(BaseModel):
    """Public view of a user; never carries the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    created_at: datetime
    updated_at: datetime


class UserCreate(BaseModel):
    email: AccountEmail
    password: str = Field(min_length=6)


class UserUpdate(BaseModel):
    email: AccountEmail | None = None
    password: str | None = Field(default=None, min_length=6)


class LoginRequest(BaseModel):
    email: Annotated[str, StringConstraints(strip_whitespace=True, to_lower=True, min_length=1)]
    password: str = Field(min_length=1)


class LoginData(BaseModel):
    token: str
    user: UserRead


class NotificationJob(BaseModel):
    """Email delivery job as it travels through the queue."""

    to: EmailStr
    subject: str
    body: str
    from_email: EmailStr
    from_name: str


__all__ = [
    "ApiResponse",
    "ErrorResponse",
    "LoginData",
    "LoginRequest",
    "NotificationJob",
    "StockQueryRead",
    "StockQuote",
    "UserCreate",
    "UserRead",
    "UserUpdate",
    "normalize_email",
]
