"""Signed bearer tokens (JWT) carrying the caller's identity."""
import time
from collections.abc import Callable
from dataclasses import dataclass

from jose import JWTError, jwt
from jose.exceptions import JWTClaimsError

from stock_quote_api.errors import (ExpiredTokenError, InvalidSignatureError,
                                    MalformedTokenError)


@dataclass(frozen=True)
class TokenClaims:
    """Decoded claims of a verified token."""

    user_id: int
    email: str
    issued_at: int
    expires_at: int


class TokenCodec:
    """Issues and verifies HMAC-signed JWTs.

    A token is valid iff its signature verifies with the configured secret and
    the current time is strictly before its `exp` claim.
    """

    def __init__(
        self,
        secret: str,
        ttl_seconds: int,
        *,
        algorithm: str = "HS256",
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._secret = secret
        self._ttl = ttl_seconds
        self._algorithm = algorithm
        self._clock = clock

    @property
    def ttl_seconds(self) -> int:
        return self._ttl

    def issue(self, user_id: int, email: str) -> str:
        """Sign a token for the given identity, valid for the configured TTL."""
        issued_at = int(self._clock())
        claims = {
            "iat": issued_at,
            "exp": issued_at + self._ttl,
            "user_id": user_id,
            "email": email,
        }
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Decode a token.

        Raises:
            MalformedTokenError: the token is not a parseable JWT or lacks claims.
            InvalidSignatureError: the signature does not match the secret.
            ExpiredTokenError: the current time is at or past `exp`.
        """
        try:
            jwt.get_unverified_header(token)
            jwt.get_unverified_claims(token)
        except JWTError as exc:
            raise MalformedTokenError(str(exc) or "unparseable token") from exc

        try:
            # Expiry is checked below against the injectable clock
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"verify_exp": False},
            )
        except JWTClaimsError as exc:
            raise MalformedTokenError(str(exc)) from exc
        except JWTError as exc:
            raise InvalidSignatureError() from exc

        try:
            claims = TokenClaims(
                user_id=int(payload["user_id"]),
                email=str(payload["email"]),
                issued_at=int(payload.get("iat", 0)),
                expires_at=int(payload["exp"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise MalformedTokenError(f"missing or invalid claim {exc}") from exc

        if self._clock() >= claims.expires_at:
            raise ExpiredTokenError()
        return claims
