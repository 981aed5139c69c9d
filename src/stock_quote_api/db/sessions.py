"""Database engine and session management."""
from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import event
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from stock_quote_api.db.models import (  # noqa: F401  # pylint: disable=unused-import
    StockQuery, User)


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Explicit persistence handle: one engine, sessions on demand.

    Built once at startup and handed to whoever needs sessions; there is no
    module-level engine.
    """

    def __init__(self, url: str, *, echo: bool = False) -> None:
        if url.startswith("sqlite"):
            kwargs: dict = {"connect_args": {"check_same_thread": False}}
            if url in ("sqlite://", "sqlite:///:memory:"):
                # One shared connection so every session sees the same in-memory DB
                kwargs["poolclass"] = StaticPool
        else:
            kwargs = {"pool_pre_ping": True, "pool_size": 5, "max_overflow": 10}
        self.engine = create_engine(url, echo=echo, **kwargs)
        if url.startswith("sqlite"):
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Yield a database session; closes and rolls back on error."""
        session = Session(self.engine)
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def init_db(self) -> None:
        """Create all tables. Safe to call on startup (idempotent for existing tables)."""
        SQLModel.metadata.create_all(self.engine)

    def drop_all(self) -> None:
        SQLModel.metadata.drop_all(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()
