import asyncio
import threading

import pytest
from sqlalchemy.exc import IntegrityError

from stock_quote_api.auth import Identity
from stock_quote_api.errors import UnknownUserError
from stock_quote_api.services import StockService

IDENTITY = Identity(user_id=1, email="user@example.com")


class RecordingHistory:
    def __init__(self, error=None):
        self.error = error
        self.rows = []
        self.threads = []

    def create(self, user_id, quote):
        self.threads.append(threading.get_ident())
        if self.error is not None:
            raise self.error
        self.rows.append((user_id, quote.symbol))


class ThreadRecordingPublisher:
    def __init__(self):
        self.threads = []

    def notify(self, recipient, subject, data, template="stock_quote"):
        self.threads.append(threading.get_ident())
        return True


def run_lookup(service, symbol="AAPL.US"):
    async def _run():
        loop_thread = threading.get_ident()
        quote = await service.lookup(IDENTITY, symbol)
        return loop_thread, quote

    return asyncio.run(_run())


def test_history_write_and_publish_run_off_the_event_loop(provider):
    history = RecordingHistory()
    publisher = ThreadRecordingPublisher()

    loop_thread, quote = run_lookup(StockService(provider, history, publisher))

    assert quote.symbol == "AAPL.US"
    assert history.rows == [(1, "AAPL.US")]
    assert history.threads and loop_thread not in history.threads
    assert publisher.threads and loop_thread not in publisher.threads


def test_history_write_for_deleted_user_is_unauthorized(provider):
    error = IntegrityError("INSERT INTO stock_queries", {}, Exception("FOREIGN KEY constraint failed"))
    publisher = ThreadRecordingPublisher()
    service = StockService(provider, RecordingHistory(error=error), publisher)

    with pytest.raises(UnknownUserError) as exc_info:
        run_lookup(service)

    assert exc_info.value.status_code == 401
    assert publisher.threads == []
