"""Blog generation API endpoint."""

import asyncio
import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from draftpress.api.dependencies import (
    CurrentUser,
    get_app_settings,
    get_blog_generator,
    get_post_repository,
)
from draftpress.config import Settings
from draftpress.errors import GenerationFailed, ValidationFailed
from draftpress.schemas.common import Envelope
from draftpress.schemas.generate import GenerateRequest
from draftpress.schemas.post import PostResponse
from draftpress.services.generation import BlogGenerator
from draftpress.services.posts import PostRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/generate", tags=["generate"])


@router.post("", response_model=Envelope[PostResponse])
async def generate_post(
    request_data: GenerateRequest,
    current_user: CurrentUser,
    posts: Annotated[PostRepository, Depends(get_post_repository)],
    generator: Annotated[BlogGenerator, Depends(get_blog_generator)],
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    """Generate a blog draft and save it for the current user."""
    try:
        generated = await asyncio.wait_for(
            generator.generate(request_data.topic, request_data.style),
            timeout=settings.generation_timeout_seconds,
        )
    except TimeoutError as e:
        logger.error(
            f"Generation timed out after {settings.generation_timeout_seconds}s "
            f"for user {current_user.id}"
        )
        raise GenerationFailed() from e
    except GenerationFailed as e:
        logger.error(f"Generation failed for user {current_user.id}: {e.message}")
        raise GenerationFailed() from e
    except Exception as e:
        logger.exception(f"Generator raised for user {current_user.id}")
        raise GenerationFailed() from e

    try:
        post = posts.create(
            current_user.id, title=generated.title, content=generated.content, is_draft=True
        )
    except ValidationFailed as e:
        logger.error(f"Generator output rejected: {e.message}")
        raise GenerationFailed() from e

    return Envelope(data=PostResponse.model_validate(post))
