"""Asynchronous email notifications.

The web process renders and publishes jobs (NotificationPublisher over a
MessageQueue); a separate worker process consumes them and sends them over
SMTP (see `consumer`).
"""
from stock_quote_api.notifications.mailer import (MailDeliveryError, Mailer,
                                                  SmtpConfig)
from stock_quote_api.notifications.publisher import (STOCK_QUOTE_TEMPLATE,
                                                     NotificationPublisher)
from stock_quote_api.notifications.message_queue import MessageQueue
from stock_quote_api.notifications.templates import TemplateRenderer

__all__ = [
    "MailDeliveryError",
    "Mailer",
    "MessageQueue",
    "NotificationPublisher",
    "STOCK_QUOTE_TEMPLATE",
    "SmtpConfig",
    "TemplateRenderer",
]
