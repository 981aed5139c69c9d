"""Application errors carrying the HTTP status they map to.

Services and the auth gate raise these; `responses.register_exception_handlers`
renders them into the `{success, message, error_code}` envelope.
"""


class ApiError(Exception):
    """Base error with an HTTP status code and a client-facing message."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationFailedError(ApiError):
    status_code = 400
    default_message = "Invalid request"


class EmailInUseError(ValidationFailedError):
    default_message = "Email already in use"


class NotFoundError(ApiError):
    status_code = 404
    default_message = "Not found"


class UpstreamError(ApiError):
    status_code = 502
    default_message = "Upstream service error"


class UpstreamTimeoutError(ApiError):
    status_code = 504
    default_message = "Request timed out"


class AuthenticationError(ApiError):
    """Any failure of the bearer token gate or of login. Always 401."""

    status_code = 401
    default_message = "Unauthorized"


class InvalidCredentialsError(AuthenticationError):
    default_message = "Invalid credentials"


class MissingTokenError(AuthenticationError):
    default_message = "JWT token not found"


class ExpiredTokenError(AuthenticationError):
    default_message = "Token has expired"


class InvalidSignatureError(AuthenticationError):
    default_message = "Invalid token signature"


class MalformedTokenError(AuthenticationError):
    default_message = "Invalid token"

    def __init__(self, reason: str | None = None) -> None:
        super().__init__(f"Invalid token: {reason}" if reason else None)


class UnknownUserError(AuthenticationError):
    """A valid token whose user has since been deleted."""

    default_message = "User no longer exists"
