"""User management over the users repository."""
import logging

from stock_quote_api.auth import hash_password
from stock_quote_api.db.models import User
from stock_quote_api.errors import EmailInUseError, NotFoundError
from stock_quote_api.repositories import UserRepository
from stock_quote_api.schemas import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """CRUD rules for accounts: unique emails, hashed passwords."""

    def __init__(self, users: UserRepository) -> None:
        self._users = users

    def list_users(self) -> list[User]:
        return self._users.find_all()

    def get_user(self, user_id: int) -> User:
        user = self._users.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def create_user(self, payload: UserCreate) -> User:
        email = str(payload.email)
        if self._users.find_by_email(email) is not None:
            raise EmailInUseError()
        user = self._users.create(email, hash_password(payload.password))
        logger.info("Created user %s (id=%s)", user.email, user.id)
        return user

    def update_user(self, user_id: int, payload: UserUpdate) -> User:
        """Apply the fields present in the payload; others stay unchanged."""
        user = self.get_user(user_id)
        changes: dict[str, str] = {}
        if payload.email is not None and str(payload.email) != user.email:
            other = self._users.find_by_email(str(payload.email))
            if other is not None and other.id != user.id:
                raise EmailInUseError()
            changes["email"] = str(payload.email)
        if payload.password is not None:
            changes["password_hash"] = hash_password(payload.password)
        if not changes:
            return user
        return self._users.update(user, **changes)

    def delete_user(self, user_id: int) -> None:
        user = self.get_user(user_id)
        self._users.delete(user)
        logger.info("Deleted user id=%s", user_id)
