"""Login: check credentials and issue a bearer token."""
import logging

from stock_quote_api.auth import TokenCodec, verify_password
from stock_quote_api.errors import InvalidCredentialsError
from stock_quote_api.repositories import UserRepository
from stock_quote_api.schemas import LoginData, UserRead

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, users: UserRepository, codec: TokenCodec) -> None:
        self._users = users
        self._codec = codec

    def login(self, email: str, password: str) -> LoginData:
        """Return a token and the user, or raise InvalidCredentialsError.

        Unknown email and wrong password are indistinguishable to the caller.
        """
        user = self._users.find_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Failed login for %s", email)
            raise InvalidCredentialsError()
        token = self._codec.issue(user.id, user.email)
        return LoginData(token=token, user=UserRead.model_validate(user))
