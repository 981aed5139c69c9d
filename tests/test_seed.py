import pytest

from stock_quote_api.auth import verify_password
from stock_quote_api.db import SEEDERS, Database, Seeder, run_seeders
from stock_quote_api.repositories import StockQueryRepository, UserRepository
from stock_quote_api.schemas import StockQuote
from stock_quote_api.settings import Settings


@pytest.fixture
def database():
    db = Database("sqlite://")
    db.init_db()
    yield db
    db.dispose()


@pytest.fixture
def settings():
    return Settings(_env_file=None, DEFAULT_USERNAME="seed@example.com", DEFAULT_PASSWORD="seedpass")


def test_default_user_is_seeded_once(database, settings):
    with database.session() as session:
        assert run_seeders(session, settings) == ["default_user"]
        run_seeders(session, settings)

        users = UserRepository(session).find_all()
        assert [u.email for u in users] == ["seed@example.com"]
        assert verify_password("seedpass", users[0].password_hash)


def test_default_user_skipped_when_users_exist(database, settings):
    with database.session() as session:
        UserRepository(session).create("first@example.com", "hash")

        run_seeders(session, settings)

        assert UserRepository(session).count() == 1


def test_seeders_run_in_order(database, settings):
    order = []
    seeders = (
        Seeder("one", lambda session, s: order.append("one")),
        Seeder("two", lambda session, s: order.append("two")),
    )

    with database.session() as session:
        assert run_seeders(session, settings, seeders) == ["one", "two"]
    assert order == ["one", "two"]
    assert [s.name for s in SEEDERS] == ["default_user"]


def test_deleting_user_removes_history(database):
    quote = StockQuote(symbol="AAPL.US", open=1, high=2, low=0.5, close=1.5)
    with database.session() as session:
        users = UserRepository(session)
        history = StockQueryRepository(session)
        user = users.create("gone@example.com", "hash")
        history.create(user.id, quote)
        user_id = user.id

        users.delete(user)

        assert history.get_user_history(user_id) == []
        assert users.find_by_id(user_id) is None
