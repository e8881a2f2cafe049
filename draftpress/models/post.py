"""Post model."""

from sqlalchemy import Boolean, Column, ForeignKey, Index, String, Text, true
from sqlalchemy.orm import relationship

from draftpress.database import Base
from draftpress.models.mixins import IdMixin, TimestampMixin

TITLE_MAX_LENGTH = 100


class Post(Base, IdMixin, TimestampMixin):
    """Blog post, generated or written by its owner."""

    __tablename__ = "posts"
    __table_args__ = (
        Index("ix_posts_owner_id_is_draft", "owner_id", "is_draft"),
        Index("ix_posts_created_at", "created_at"),
    )

    title = Column(String(TITLE_MAX_LENGTH), nullable=False)
    content = Column(Text, nullable=False)
    owner_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)
    is_draft = Column(Boolean, nullable=False, default=True, server_default=true())

    # Relationships
    owner = relationship("User", backref="posts")
