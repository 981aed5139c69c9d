"""Publishing jobs to the durable broker queue."""
import logging
from collections.abc import Mapping
from typing import Any

from stock_quote_api.notifications.broker import (PERSISTENT,
                                                  create_connection,
                                                  email_queue)

logger = logging.getLogger(__name__)


class MessageQueue:
    """Publishes JSON jobs to named durable queues.

    A connection is opened per publish. `publish` never raises: a disabled
    queue or an unreachable broker is reported as False so callers can
    degrade gracefully.
    """

    def __init__(self, broker_url: str, *, enabled: bool = True, timeout: float | None = None) -> None:
        self._broker_url = broker_url
        self._enabled = enabled
        self._timeout = timeout

    @property
    def enabled(self) -> bool:
        return self._enabled

    def publish(self, queue: str, job: Mapping[str, Any]) -> bool:
        """Put one job on `queue` as a persistent JSON message."""
        if not self._enabled:
            logger.debug("Message queue disabled; dropping job for %s", queue)
            return False
        try:
            with create_connection(self._broker_url, self._timeout) as connection:
                producer = connection.Producer(serializer="json")
                producer.publish(
                    dict(job),
                    routing_key=queue,
                    delivery_mode=PERSISTENT,
                    declare=[email_queue(queue)],
                    retry=False,
                )
        except Exception as exc:  # pylint: disable=broad-except
            logger.error("Failed to publish message to %s: %s", queue, exc)
            return False
        return True
