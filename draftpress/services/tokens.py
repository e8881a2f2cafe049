"""Token service for signed, time-limited identity tokens."""

import logging
from datetime import UTC, datetime, timedelta

from jose import ExpiredSignatureError, JWTError, jwt

from draftpress.config import Settings
from draftpress.errors import TokenExpired, TokenInvalid, TokenMissing

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(hours=24)


class TokenService:
    """Issues and verifies JWT access tokens signed with a server-held secret."""

    def __init__(self, secret: str, algorithm: str = "HS256", ttl: timedelta = DEFAULT_TTL):
        if not secret:
            raise ValueError("A signing secret is required")
        self.secret = secret
        self.algorithm = algorithm
        self.ttl = ttl

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            ttl=timedelta(minutes=settings.jwt_expiration_minutes),
        )

    def issue(self, identity_id: str, ttl: timedelta | None = None) -> str:
        """Create a token naming ``identity_id`` that expires after ``ttl``."""
        now = datetime.now(UTC)
        claims = {
            "sub": str(identity_id),
            "iat": now,
            "exp": now + (ttl if ttl is not None else self.ttl),
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def verify(self, token: str | None) -> str:
        """Return the identity id a token names.

        Raises:
            TokenMissing: no token supplied.
            TokenExpired: the token is past its expiry.
            TokenInvalid: bad signature or structure, or no identity claim.
        """
        if not token:
            raise TokenMissing()

        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require_exp": True, "require_sub": True},
            )
        except ExpiredSignatureError as e:
            raise TokenExpired() from e
        except JWTError as e:
            logger.debug(f"Token rejected: {e}")
            raise TokenInvalid() from e

        identity_id = payload.get("sub")
        if not isinstance(identity_id, str) or not identity_id:
            raise TokenInvalid()
        return identity_id
