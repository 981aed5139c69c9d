"""API routers.

Includes routes for:
- /auth/login - Bearer token login
- /users - User management (protected)
- /stock, /history - Stock quotes and query history (protected)
"""
from stock_quote_api.routers.auth import router as auth_router
from stock_quote_api.routers.stocks import router as stocks_router
from stock_quote_api.routers.users import router as users_router

__all__ = [
    "auth_router",
    "stocks_router",
    "users_router",
]
