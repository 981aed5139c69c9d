"""Bearer token gate for protected routes.

The gate is a pure function of the Authorization header, the token codec and
the clock: it never retries and never touches storage.
"""
import logging
import re
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Request

from stock_quote_api.auth.tokens import TokenCodec
from stock_quote_api.errors import AuthenticationError, MissingTokenError

logger = logging.getLogger(__name__)

_BEARER_RE = re.compile(r"^\s*Bearer\s+(\S+)\s*$")


@dataclass(frozen=True)
class Identity:
    """Authenticated caller attached to the request."""

    user_id: int
    email: str


class AuthGate:
    def __init__(self, codec: TokenCodec) -> None:
        self._codec = codec

    def authenticate(self, authorization: str | None) -> Identity:
        """Turn an Authorization header value into an Identity.

        Raises MissingTokenError when no bearer token is present and the
        codec's errors (expired, bad signature, malformed) otherwise.
        """
        match = _BEARER_RE.match(authorization or "")
        if match is None:
            raise MissingTokenError()
        claims = self._codec.verify(match.group(1))
        return Identity(user_id=claims.user_id, email=claims.email)


def get_auth_gate(request: Request) -> AuthGate:
    """Resolve the AuthGate built at startup."""
    return request.app.state.auth_gate


def get_identity(
    request: Request,
    gate: Annotated[AuthGate, Depends(get_auth_gate)],
) -> Identity:
    """FastAPI dependency guarding a route; stores the identity on request.state."""
    try:
        identity = gate.authenticate(request.headers.get("Authorization"))
    except AuthenticationError as exc:
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.message)
        raise
    request.state.identity = identity
    return identity


CurrentIdentity = Annotated[Identity, Depends(get_identity)]
