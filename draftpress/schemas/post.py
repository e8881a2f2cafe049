"""Post schemas."""

from datetime import datetime

from pydantic import ConfigDict, StrictBool, StrictStr, model_validator
from pydantic_core import PydanticCustomError

from draftpress.schemas.common import CamelModel


class PostCreate(CamelModel):
    """Create a new post."""

    title: StrictStr | None = None
    content: StrictStr | None = None
    is_draft: StrictBool = True

    @model_validator(mode="after")
    def require_title_and_content(self) -> "PostCreate":
        if not self.title or not self.title.strip() or not self.content or not self.content.strip():
            raise PydanticCustomError("missing_fields", "Please provide title and content")
        return self


class PostUpdate(CamelModel):
    """Update a post. Only the supplied fields change."""

    model_config = ConfigDict(extra="forbid")

    title: StrictStr | None = None
    content: StrictStr | None = None
    is_draft: StrictBool | None = None

    @model_validator(mode="after")
    def require_a_field(self) -> "PostUpdate":
        if not self.model_fields_set:
            raise PydanticCustomError("no_fields", "Please provide a field to update")
        return self


class PostResponse(CamelModel):
    """Post response."""

    id: str
    title: str
    content: str
    owner_id: str
    is_draft: bool
    created_at: datetime
    updated_at: datetime
