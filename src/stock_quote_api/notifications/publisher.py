"""Notification publisher: render, wrap into a job, enqueue."""
import logging
from collections.abc import Mapping
from typing import Any

from stock_quote_api.notifications.message_queue import MessageQueue
from stock_quote_api.notifications.templates import TemplateRenderer
from stock_quote_api.schemas import NotificationJob

logger = logging.getLogger(__name__)

STOCK_QUOTE_TEMPLATE = "stock_quote"


class NotificationPublisher:
    """Queues notification emails for the consumer process.

    Delivery is best effort: `notify` returns False instead of raising when
    the job cannot be queued, so the caller's request still succeeds.
    """

    def __init__(
        self,
        queue: MessageQueue,
        renderer: TemplateRenderer,
        *,
        queue_name: str = "email_queue",
        from_email: str = "stock-api@example.com",
        from_name: str = "Stock API",
    ) -> None:
        self._queue = queue
        self._renderer = renderer
        self._queue_name = queue_name
        self._from_email = from_email
        self._from_name = from_name

    def build_job(
        self,
        recipient: str,
        subject: str,
        data: Mapping[str, Any],
        template: str = STOCK_QUOTE_TEMPLATE,
    ) -> NotificationJob:
        body = self._renderer.render(template, {"stock": data})
        return NotificationJob(
            to=recipient,
            subject=subject,
            body=body,
            from_email=self._from_email,
            from_name=self._from_name,
        )

    def notify(
        self,
        recipient: str,
        subject: str,
        data: Mapping[str, Any],
        template: str = STOCK_QUOTE_TEMPLATE,
    ) -> bool:
        """Render `data` and enqueue one email job. Returns whether it was queued."""
        if not self._queue.enabled:
            return False
        try:
            job = self.build_job(recipient, subject, data, template)
        except ValueError as exc:
            logger.error("Not queueing notification for %s: %s", recipient, exc)
            return False
        queued = self._queue.publish(self._queue_name, job.model_dump(mode="json"))
        if queued:
            logger.info("Queued '%s' email for %s", subject, recipient)
        return queued
