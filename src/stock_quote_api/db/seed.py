"""Initial data. Seeders run in the order they appear in SEEDERS."""
import logging
from collections.abc import Callable
from typing import NamedTuple

from sqlmodel import Session

from stock_quote_api.auth.passwords import hash_password
from stock_quote_api.repositories.users import UserRepository
from stock_quote_api.schemas import normalize_email
from stock_quote_api.settings import Settings

logger = logging.getLogger(__name__)


class Seeder(NamedTuple):
    name: str
    run: Callable[[Session, Settings], None]


def seed_default_user(session: Session, settings: Settings) -> None:
    """Create the DEFAULT_USERNAME account, but only into an empty users table."""
    users = UserRepository(session)
    if users.count() > 0:
        logger.info("Users already exist; skipping default user")
        return
    email = normalize_email(settings.DEFAULT_USERNAME)
    users.create(email, hash_password(settings.DEFAULT_PASSWORD))
    logger.info("Created default user %s", email)


SEEDERS: tuple[Seeder, ...] = (
    Seeder("default_user", seed_default_user),
)


def run_seeders(
    session: Session,
    settings: Settings,
    seeders: tuple[Seeder, ...] = SEEDERS,
) -> list[str]:
    """Run each seeder once; returns the names that ran."""
    ran = []
    for seeder in seeders:
        logger.debug("Running seeder %s", seeder.name)
        seeder.run(session, settings)
        ran.append(seeder.name)
    return ran
