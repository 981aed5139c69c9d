"""Authentication: password hashing, JWT codec and the bearer token gate."""
from stock_quote_api.auth.gate import (AuthGate, CurrentIdentity, Identity,
                                       get_identity)
from stock_quote_api.auth.passwords import hash_password, verify_password
from stock_quote_api.auth.tokens import TokenClaims, TokenCodec

__all__ = [
    "AuthGate",
    "CurrentIdentity",
    "Identity",
    "TokenClaims",
    "TokenCodec",
    "get_identity",
    "hash_password",
    "verify_password",
]
