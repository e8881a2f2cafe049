"""Credential store: user records and password hashing."""

import logging

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from draftpress.errors import DuplicateKey, ValidationFailed
from draftpress.models.user import EMAIL_MAX_LENGTH, User

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash. Unrecognised hashes never match."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        logger.warning("Stored password hash could not be identified")
        return False


class UserStore:
    """Owns user records. The only component that writes to ``users``."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str) -> User | None:
        """Get a user by email, password hash included."""
        return self.db.query(User).filter(User.email == email).first()

    def find_by_id(self, user_id: str) -> User | None:
        """Get a user by id."""
        return self.db.query(User).filter(User.id == user_id).first()

    def create(self, email: str | None, password: str | None) -> User:
        """Create a user with a hashed password.

        Raises:
            ValidationFailed: email or password missing, or email too long.
            DuplicateKey: a user with this email already exists.
        """
        email = email.strip() if isinstance(email, str) else email
        missing = [
            name for name, value in (("email", email), ("password", password)) if not value
        ]
        if missing:
            raise ValidationFailed("Please provide email and password", fields=missing)
        if len(email) > EMAIL_MAX_LENGTH:
            raise ValidationFailed(
                f"Email cannot be more than {EMAIL_MAX_LENGTH} characters", fields=["email"]
            )

        if self.find_by_email(email) is not None:
            logger.info(f"Signup rejected, email already registered: {email}")
            raise DuplicateKey()

        user = User(email=email, password_hash=get_password_hash(password))
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent signup for the same address
            self.db.rollback()
            logger.info(f"Signup rejected by unique index for {email}")
            raise DuplicateKey() from e
        self.db.refresh(user)
        logger.info(f"Created user {user.id}")
        return user

    def verify_password(self, user: User | None, candidate: str) -> bool:
        """Check a candidate password for a user.

        A missing user still costs one hash comparison so both failure paths
        take about the same time.
        """
        if user is None:
            pwd_context.dummy_verify()
            return False
        return verify_password(candidate, user.password_hash)

    def authenticate(self, email: str, password: str) -> User | None:
        """Authenticate a user by email and password."""
        user = self.find_by_email(email)
        if not self.verify_password(user, password):
            reason = "unknown email" if user is None else "wrong password"
            logger.info(f"Login failed for {email}: {reason}")
            return None
        return user
