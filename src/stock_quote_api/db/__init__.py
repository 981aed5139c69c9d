"""Database package: models, the Database handle and seeders."""
from stock_quote_api.db.models import StockQuery, User
from stock_quote_api.db.seed import SEEDERS, Seeder, run_seeders
from stock_quote_api.db.sessions import Database

__all__ = ["SEEDERS", "Database", "Seeder", "StockQuery", "User", "run_seeders"]
