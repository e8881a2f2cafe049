"""FastAPI dependencies for authentication and data access."""

import logging
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from draftpress.config import Settings
from draftpress.database import get_db
from draftpress.errors import TokenError, Unauthorized, UserNoLongerExists
from draftpress.models.user import User
from draftpress.services.generation import BlogGenerator
from draftpress.services.posts import PostRepository
from draftpress.services.tokens import TokenService
from draftpress.services.users import UserStore

logger = logging.getLogger(__name__)

# Missing or non-Bearer headers come through as None so the gate can answer itself
security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    """Token service holding the app's signing secret."""
    return request.app.state.token_service


def get_blog_generator(request: Request) -> BlogGenerator:
    """Configured blog generation backend."""
    return request.app.state.generator


def get_user_store(db: Annotated[Session, Depends(get_db)]) -> UserStore:
    """Get credential store bound to the request session."""
    return UserStore(db)


def get_post_repository(db: Annotated[Session, Depends(get_db)]) -> PostRepository:
    """Get post repository bound to the request session."""
    return PostRepository(db)


def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    users: Annotated[UserStore, Depends(get_user_store)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> User:
    """Resolve the authenticated user from the Bearer token.

    Every token failure (missing, malformed, expired, forged) is reported as
    "Not logged in". A valid token for a user that has since disappeared gets
    its own message. Only a successful check touches the request state.
    """
    if credentials is None:
        raise Unauthorized()

    try:
        user_id = tokens.verify(credentials.credentials)
    except TokenError as e:
        logger.debug(f"Rejected token on {request.url.path}: {type(e).__name__}")
        raise Unauthorized() from e

    user = users.find_by_id(user_id)
    if user is None:
        logger.info(f"Token names unknown user {user_id}")
        raise UserNoLongerExists()

    request.state.user = user
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
