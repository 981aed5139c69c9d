"""CLI entry point for database setup: `stock-quote-db init|seed`."""
import argparse
import logging

from stock_quote_api.db.seed import run_seeders
from stock_quote_api.db.sessions import Database
from stock_quote_api.settings import get_settings
from stock_quote_api.utils import configure_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Create tables (`init`), and optionally insert initial data (`seed`)."""
    parser = argparse.ArgumentParser(prog="stock-quote-db")
    parser.add_argument("command", choices=["init", "seed"],
                        help="init: create tables; seed: create tables and run seeders")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    database = Database(settings.database_url, echo=settings.SQL_ECHO)
    try:
        database.init_db()
        logger.info("Tables created")
        if args.command == "seed":
            with database.session() as session:
                ran = run_seeders(session, settings)
            logger.info("Seeders run: %s", ", ".join(ran))
    finally:
        database.dispose()
