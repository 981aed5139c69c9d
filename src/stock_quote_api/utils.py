"""Shared utilities for the stock quote service."""
import logging
from datetime import datetime, timezone

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def utcnow() -> datetime:
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


def configure_logging(level: str = "INFO") -> None:
    """Set the root logger format and level once per process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
