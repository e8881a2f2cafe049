"""SQLAlchemy models."""

from draftpress.models.post import Post
from draftpress.models.user import User

__all__ = [
    "User",
    "Post",
]
