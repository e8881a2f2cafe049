"""Authentication schemas."""

import re
from datetime import datetime

from pydantic import StrictStr, model_validator
from pydantic_core import PydanticCustomError

from draftpress.models.user import EMAIL_MAX_LENGTH
from draftpress.schemas.common import CamelModel

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
PASSWORD_MIN_LENGTH = 6


def is_valid_email(email: str) -> bool:
    """Check an address against the accepted email pattern."""
    return bool(EMAIL_PATTERN.match(email))


class Credentials(CamelModel):
    """Email and password pair, shared by signup and login."""

    email: StrictStr | None = None
    password: StrictStr | None = None

    @model_validator(mode="after")
    def check_credentials(self) -> "Credentials":
        """Check presence, then email length and format, then password length."""
        if not self.email or not self.password:
            raise PydanticCustomError("missing_fields", "Please provide email and password")
        self.email = self.email.strip()
        if len(self.email) > EMAIL_MAX_LENGTH:
            raise PydanticCustomError(
                "long_email",
                "Email cannot be more than {max_length} characters",
                {"max_length": EMAIL_MAX_LENGTH},
            )
        if not is_valid_email(self.email):
            raise PydanticCustomError("invalid_email", "Invalid email format")
        if len(self.password) < PASSWORD_MIN_LENGTH:
            raise PydanticCustomError(
                "short_password",
                "Password must be at least {min_length} characters long",
                {"min_length": PASSWORD_MIN_LENGTH},
            )
        return self


class UserSignup(Credentials):
    """User signup request."""


class UserLogin(Credentials):
    """User login request."""


class UserResponse(CamelModel):
    """User information response. Never carries the password hash."""

    id: str
    email: str
    created_at: datetime
    updated_at: datetime


class AuthResponse(CamelModel):
    """Authentication response with token and user info."""

    user: UserResponse
    token: str
