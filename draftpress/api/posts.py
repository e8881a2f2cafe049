"""Post API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from draftpress.api.dependencies import CurrentUser, get_post_repository
from draftpress.schemas.common import Envelope
from draftpress.schemas.post import PostCreate, PostResponse, PostUpdate
from draftpress.services.posts import PostRepository

router = APIRouter(prefix="/api/posts", tags=["posts"])

Posts = Annotated[PostRepository, Depends(get_post_repository)]


@router.get("", response_model=Envelope[list[PostResponse]])
async def get_posts(current_user: CurrentUser, posts: Posts):
    """Get all posts owned by the current user, newest first."""
    return Envelope(
        data=[PostResponse.model_validate(post) for post in posts.list_all(current_user.id)]
    )


@router.post("", response_model=Envelope[PostResponse], status_code=status.HTTP_201_CREATED)
async def create_post(post_data: PostCreate, current_user: CurrentUser, posts: Posts):
    """Create a new post."""
    post = posts.create(
        current_user.id,
        title=post_data.title,
        content=post_data.content,
        is_draft=post_data.is_draft,
    )
    return Envelope(data=PostResponse.model_validate(post))


@router.get("/{post_id}", response_model=Envelope[PostResponse])
async def get_post(post_id: str, current_user: CurrentUser, posts: Posts):
    """Get a specific post."""
    return Envelope(data=PostResponse.model_validate(posts.get_one(current_user.id, post_id)))


@router.patch("/{post_id}", response_model=Envelope[PostResponse])
async def update_post(
    post_id: str, post_data: PostUpdate, current_user: CurrentUser, posts: Posts
):
    """Update the supplied fields of a post."""
    post = posts.update(current_user.id, post_id, post_data.model_dump(exclude_unset=True))
    return Envelope(data=PostResponse.model_validate(post))


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(post_id: str, current_user: CurrentUser, posts: Posts):
    """Permanently delete a post."""
    posts.delete(current_user.id, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
