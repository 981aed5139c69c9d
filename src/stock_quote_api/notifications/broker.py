"""RabbitMQ plumbing shared by the publisher (web process) and the consumer.

Jobs travel as bare JSON objects on a durable queue bound to the default
exchange, published with persistent delivery.
"""
from kombu import Connection, Queue

PERSISTENT = 2


def email_queue(name: str) -> Queue:
    """Durable queue reached through the default exchange by its own name."""
    return Queue(name, routing_key=name, durable=True)


def create_connection(broker_url: str, timeout: float | None = None) -> Connection:
    return Connection(broker_url, connect_timeout=timeout)
