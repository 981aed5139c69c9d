"""Service layer: business rules between routers and repositories/providers."""
from stock_quote_api.services.auth import AuthService
from stock_quote_api.services.stocks import StockService
from stock_quote_api.services.users import UserService

__all__ = ["AuthService", "StockService", "UserService"]
