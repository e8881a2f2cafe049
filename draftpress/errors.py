"""Application error hierarchy.

Each error carries the HTTP status and the user-safe message that the API layer
returns. Components raise the most specific class; only the exception handlers
in ``draftpress.api.errors`` turn them into responses.
"""


class AppError(Exception):
    """Base application error."""

    status_code = 500
    message = "Something went wrong"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationFailed(AppError):
    """Malformed or missing input."""

    status_code = 400
    message = "Invalid request"

    def __init__(self, message: str | None = None, fields: list[str] | None = None):
        super().__init__(message)
        self.fields = fields or []


class DuplicateKey(AppError):
    """A unique constraint would be violated."""

    status_code = 400
    message = "Email already exists"


class Unauthorized(AppError):
    """Missing, invalid or expired credential."""

    status_code = 401
    message = "Not logged in"


class TokenError(Unauthorized):
    """Base for token verification failures."""


class TokenMissing(TokenError):
    """No token was supplied."""


class TokenExpired(TokenError):
    """The token is past its expiry."""


class TokenInvalid(TokenError):
    """Bad signature, bad structure, or no identity claim."""


class UserNoLongerExists(Unauthorized):
    """The token names an identity that is not in the store."""

    message = "User no longer exists"


class InvalidCredentials(Unauthorized):
    """Unknown email or wrong password."""

    message = "Invalid credentials"


class NotFound(AppError):
    """Scoped lookup miss."""

    status_code = 404
    message = "Not found"


class UpstreamFailure(AppError):
    """An external service failed."""

    status_code = 500
    message = "Failed to generate post"


class GenerationFailed(UpstreamFailure):
    """The blog generation backend failed or timed out."""


class Internal(AppError):
    """Unclassified failure."""
