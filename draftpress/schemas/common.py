"""Shared schema pieces: camelCase models and the response envelope."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Model that reads and writes camelCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Envelope(BaseModel, Generic[T]):
    """Successful response wrapper: ``{"success": true, "data": ...}``."""

    success: bool = True
    data: T


class ErrorEnvelope(BaseModel):
    """Error response wrapper: ``{"success": false, "error": "..."}``."""

    success: bool = False
    error: str
