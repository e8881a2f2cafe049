"""User model."""

from sqlalchemy import Column, String

from draftpress.database import Base
from draftpress.models.mixins import IdMixin, TimestampMixin

EMAIL_MAX_LENGTH = 255


class User(Base, IdMixin, TimestampMixin):
    """User model for authentication and post ownership."""

    __tablename__ = "users"

    email = Column(String(EMAIL_MAX_LENGTH), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User {self.id} {self.email}>"
