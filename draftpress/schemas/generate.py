"""Blog generation schemas."""

from enum import StrEnum

from pydantic import StrictStr, model_validator
from pydantic_core import PydanticCustomError

from draftpress.schemas.common import CamelModel


class BlogStyle(StrEnum):
    """Writing styles the generator supports."""

    PROFESSIONAL = "professional"
    CASUAL = "casual"
    TECHNICAL = "technical"


VALID_STYLES = [style.value for style in BlogStyle]


class GenerateRequest(CamelModel):
    """Request a generated blog draft."""

    topic: StrictStr | None = None
    style: StrictStr | None = None

    @model_validator(mode="after")
    def check_topic_and_style(self) -> "GenerateRequest":
        if not self.topic or not self.topic.strip() or not self.style:
            raise PydanticCustomError("missing_fields", "Please provide topic and style")
        if self.style not in VALID_STYLES:
            raise PydanticCustomError(
                "invalid_style",
                "Invalid style. Must be one of: {styles}",
                {"styles": ", ".join(VALID_STYLES)},
            )
        self.topic = self.topic.strip()
        return self
