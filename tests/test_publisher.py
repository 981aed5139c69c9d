import uuid

import pytest
from kombu import Connection

from stock_quote_api.notifications import (MessageQueue, NotificationPublisher,
                                           TemplateRenderer)
from stock_quote_api.notifications import message_queue as message_queue_module

QUOTE = {"symbol": "AAPL.US", "name": "APPLE", "open": 1.0, "high": 2.0, "low": 0.5, "close": 1.5}


@pytest.fixture
def queue_name():
    return f"email_queue_{uuid.uuid4().hex}"


def drain(queue_name):
    """Read back every message waiting on an in-memory queue."""
    messages = []
    with Connection("memory://") as connection:
        with connection.SimpleQueue(queue_name) as simple:
            while True:
                try:
                    message = simple.get(block=False)
                except simple.Empty:
                    break
                message.ack()
                messages.append(message)
    return messages


def make_publisher(queue_name, enabled=True, broker_url="memory://"):
    return NotificationPublisher(
        MessageQueue(broker_url, enabled=enabled),
        TemplateRenderer(),
        queue_name=queue_name,
        from_email="stock-api@example.com",
        from_name="Stock API",
    )


def test_disabled_queue_makes_no_broker_call(monkeypatch, queue_name):
    def fail(*args, **kwargs):
        raise AssertionError("broker contacted")

    monkeypatch.setattr(message_queue_module, "create_connection", fail)

    assert make_publisher(queue_name, enabled=False).notify("ann@example.com", "Quote", QUOTE) is False


def test_enabled_queue_publishes_exactly_one_bare_json_job(queue_name):
    publisher = make_publisher(queue_name)

    assert publisher.notify("ann@example.com", "Stock Quote Information", QUOTE) is True

    messages = drain(queue_name)
    assert len(messages) == 1
    job = messages[0].payload
    assert isinstance(job, dict)
    assert set(job) == {"to", "subject", "body", "from_email", "from_name"}
    assert job["to"] == "ann@example.com"
    assert job["subject"] == "Stock Quote Information"
    assert job["from_email"] == "stock-api@example.com"
    assert job["from_name"] == "Stock API"
    assert "AAPL.US" in job["body"]
    assert messages[0].content_type == "application/json"


@pytest.mark.parametrize("error", [ConnectionRefusedError("refused"), RuntimeError("broker down")])
def test_broker_failure_returns_false(monkeypatch, queue_name, error):
    def unreachable(*args, **kwargs):
        raise error

    monkeypatch.setattr(message_queue_module, "create_connection", unreachable)

    assert make_publisher(queue_name).notify("ann@example.com", "Quote", QUOTE) is False


def test_invalid_recipient_is_not_queued(queue_name):
    assert make_publisher(queue_name).notify("not-an-email", "Quote", QUOTE) is False
    assert drain(queue_name) == []
