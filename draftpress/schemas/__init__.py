"""Pydantic schemas for API requests and responses."""

from draftpress.schemas.auth import AuthResponse, UserLogin, UserResponse, UserSignup
from draftpress.schemas.common import Envelope, ErrorEnvelope
from draftpress.schemas.generate import BlogStyle, GenerateRequest
from draftpress.schemas.post import PostCreate, PostResponse, PostUpdate

__all__ = [
    "UserSignup",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "Envelope",
    "ErrorEnvelope",
    "BlogStyle",
    "GenerateRequest",
    "PostCreate",
    "PostUpdate",
    "PostResponse",
]
