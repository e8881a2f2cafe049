"""Post repository with ownership-scoped CRUD."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from draftpress.errors import NotFound, ValidationFailed
from draftpress.models.post import TITLE_MAX_LENGTH, Post

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({"title", "content", "is_draft"})


class PostNotFound(NotFound):
    """No post with that id belongs to the requesting owner."""

    message = "Post not found"


def _clean_text(field: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationFailed(f"Post {field} cannot be empty", fields=[field])
    value = value.strip()
    if field == "title" and len(value) > TITLE_MAX_LENGTH:
        raise ValidationFailed(
            f"Post title cannot be more than {TITLE_MAX_LENGTH} characters", fields=["title"]
        )
    return value


def _clean_is_draft(value: Any) -> bool:
    # bool only; 0/1 and "true" are rejected
    if not isinstance(value, bool):
        raise ValidationFailed("isDraft must be a boolean", fields=["is_draft"])
    return value


class PostRepository:
    """Owns post records.

    Every lookup filters on both the post id and the owner id, so a post that
    belongs to somebody else looks exactly like one that does not exist.
    """

    def __init__(self, db: Session):
        self.db = db

    def _scoped(self, owner_id: str, post_id: str) -> Post:
        post = self.db.query(Post).filter(Post.id == post_id, Post.owner_id == owner_id).first()
        if post is None:
            raise PostNotFound()
        return post

    def list_all(self, owner_id: str) -> list[Post]:
        """All of the owner's posts, newest first."""
        return (
            self.db.query(Post)
            .filter(Post.owner_id == owner_id)
            .order_by(Post.created_at.desc())
            .all()
        )

    def get_one(self, owner_id: str, post_id: str) -> Post:
        """Get one of the owner's posts."""
        return self._scoped(owner_id, post_id)

    def create(
        self,
        owner_id: str,
        title: str | None,
        content: str | None,
        is_draft: bool = True,
    ) -> Post:
        """Create a post for the owner."""
        missing = [
            name
            for name, value in (("title", title), ("content", content))
            if not isinstance(value, str) or not value.strip()
        ]
        if missing:
            raise ValidationFailed("Please provide title and content", fields=missing)

        post = Post(
            title=_clean_text("title", title),
            content=_clean_text("content", content),
            is_draft=_clean_is_draft(is_draft),
            owner_id=owner_id,
        )
        self.db.add(post)
        self.db.commit()
        self.db.refresh(post)
        logger.info(f"Created post {post.id} for user {owner_id}")
        return post

    def update(self, owner_id: str, post_id: str, fields: dict[str, Any]) -> Post:
        """Apply a partial update to one of the owner's posts.

        Only title, content and is_draft can change; the owner never does.
        """
        unknown = sorted(set(fields) - UPDATABLE_FIELDS)
        if unknown:
            raise ValidationFailed(
                f"Cannot update field(s): {', '.join(unknown)}", fields=unknown
            )

        changes: dict[str, Any] = {}
        for field, value in fields.items():
            if field == "is_draft":
                changes[field] = _clean_is_draft(value)
            else:
                changes[field] = _clean_text(field, value)

        post = self._scoped(owner_id, post_id)
        for field, value in changes.items():
            setattr(post, field, value)

        self.db.commit()
        self.db.refresh(post)
        logger.info(f"Updated post {post.id} fields {sorted(changes)}")
        return post

    def delete(self, owner_id: str, post_id: str) -> None:
        """Permanently delete one of the owner's posts."""
        post = self._scoped(owner_id, post_id)
        self.db.delete(post)
        self.db.commit()
        logger.info(f"Deleted post {post_id} for user {owner_id}")
