"""Notification consumer: the worker process that turns queued jobs into emails.

Run with `stock-quote-consumer`. The worker takes one message at a time
(prefetch 1) and acknowledges it after the send attempt whatever its
outcome, so a failed send is logged and dropped unless NOTIFY_MAX_RETRIES
asks for retries. Jobs that exhaust their retries go to
NOTIFY_DEAD_LETTER_QUEUE when one is configured. A broker that cannot be
reached at startup ends the process.
"""
import logging
import time
from collections.abc import Callable
from functools import lru_cache
from typing import Any

from kombu import Connection
from kombu.mixins import ConsumerMixin
from pydantic import ValidationError

from stock_quote_api.notifications.broker import (create_connection,
                                                  email_queue)
from stock_quote_api.notifications.mailer import (MailDeliveryError, Mailer,
                                                  SmtpConfig)
from stock_quote_api.notifications.message_queue import MessageQueue
from stock_quote_api.schemas import NotificationJob
from stock_quote_api.settings import get_settings
from stock_quote_api.utils import configure_logging

logger = logging.getLogger(__name__)

PREFETCH_COUNT = 1


class InvalidJobError(Exception):
    """The queued payload is not a notification job; never retried."""


class EmailConsumer:
    """Delivery policy around a Mailer: send, retry, dead-letter."""

    def __init__(
        self,
        mailer: Mailer,
        *,
        max_retries: int = 0,
        retry_delay: float = 30,
        dead_letter_queue: MessageQueue | None = None,
        dead_letter_name: str | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.mailer = mailer
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self._dead_letter_queue = dead_letter_queue
        self._dead_letter_name = dead_letter_name
        self._sleep = sleep

    def deliver(self, payload: Any) -> NotificationJob:
        """Validate and send one job.

        Raises:
            InvalidJobError: the payload is not a valid job.
            MailDeliveryError: the SMTP transport failed.
        """
        try:
            job = NotificationJob.model_validate(payload)
        except ValidationError as exc:
            raise InvalidJobError(str(exc)) from exc
        self.mailer.send(job)
        return job

    def should_retry(self, retries_done: int) -> bool:
        return retries_done < self.max_retries

    def dead_letter(self, payload: Any) -> bool:
        """Park a job that failed for good. Returns False when no DLQ is set."""
        if self._dead_letter_queue is None or not self._dead_letter_name:
            return False
        parked = self._dead_letter_queue.publish(self._dead_letter_name, payload)
        if parked:
            logger.warning("Moved failed email job to %s", self._dead_letter_name)
        return parked

    def handle(self, payload: Any) -> bool:
        """Process one queued job; returns False when it was dropped.

        Invalid jobs and delivery failures are logged, never raised.
        """
        recipient = payload.get("to") if isinstance(payload, dict) else None
        logger.info("Received email request for %s", recipient)

        retries_done = 0
        while True:
            try:
                self.deliver(payload)
            except InvalidJobError as exc:
                logger.error("Dropping invalid email job: %s", exc)
                return False
            except MailDeliveryError as exc:
                if not self.should_retry(retries_done):
                    logger.error("Failed to send email to %s: %s", recipient, exc)
                    self.dead_letter(payload)
                    return False
                retries_done += 1
                logger.warning(
                    "Failed to send email to %s (retry %d of %d in %ss): %s",
                    recipient, retries_done, self.max_retries, self.retry_delay, exc,
                )
                self._sleep(self.retry_delay)
                continue
            logger.info("Email sent successfully to %s", recipient)
            return True


class EmailWorker(ConsumerMixin):
    """Consumes raw JSON jobs from one queue, one message in flight at a time."""

    def __init__(self, connection: Connection, consumer: EmailConsumer, queue_name: str) -> None:
        self.connection = connection
        self.consumer = consumer
        self.queue_name = queue_name

    def get_consumers(self, Consumer, channel):  # noqa: N803
        return [Consumer(
            queues=[email_queue(self.queue_name)],
            callbacks=[self.on_message],
            accept=["json"],
            prefetch_count=PREFETCH_COUNT,
        )]

    def on_message(self, body: Any, message) -> None:
        try:
            self.consumer.handle(body)
        finally:
            message.ack()


@lru_cache
def get_consumer() -> EmailConsumer:
    """Consumer built from settings, once per worker process."""
    settings = get_settings()
    config = None
    if settings.MAILER_ENABLED:
        config = SmtpConfig.from_dsn(settings.mailer_dsn, timeout=settings.MAILER_TIMEOUT)
    dead_letter_queue = None
    if settings.NOTIFY_DEAD_LETTER_QUEUE:
        dead_letter_queue = MessageQueue(settings.broker_url, timeout=settings.RMQ_TIMEOUT)
    return EmailConsumer(
        Mailer(config),
        max_retries=settings.NOTIFY_MAX_RETRIES,
        retry_delay=settings.NOTIFY_RETRY_DELAY,
        dead_letter_queue=dead_letter_queue,
        dead_letter_name=settings.NOTIFY_DEAD_LETTER_QUEUE,
    )


def connect(broker_url: str, timeout: float | None = None) -> Connection:
    """Open the broker connection once, without retrying.

    Raises the transport's connection error when the broker is unreachable.
    """
    connection = create_connection(broker_url, timeout)
    connection.connect()
    return connection


def run() -> None:
    """Start a single-threaded worker consuming the email queue."""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    consumer = get_consumer()
    try:
        connection = connect(settings.broker_url, settings.RMQ_TIMEOUT)
    except Exception as exc:  # pylint: disable=broad-except
        logger.error("Cannot connect to message broker: %s", exc)
        raise SystemExit(1) from exc
    logger.info(
        "Starting email consumer on queue %s (mailer %s)",
        settings.EMAIL_QUEUE, "enabled" if consumer.mailer.enabled else "disabled",
    )
    with connection:
        EmailWorker(connection, consumer, settings.EMAIL_QUEUE).run()
