"""Repositories: persistence access over an explicit SQLModel session."""
from stock_quote_api.repositories.stock_queries import StockQueryRepository
from stock_quote_api.repositories.users import UserRepository

__all__ = ["StockQueryRepository", "UserRepository"]
