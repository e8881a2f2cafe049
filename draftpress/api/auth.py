"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from draftpress.api.dependencies import get_token_service, get_user_store
from draftpress.errors import InvalidCredentials
from draftpress.schemas.auth import AuthResponse, UserLogin, UserResponse, UserSignup
from draftpress.schemas.common import Envelope
from draftpress.services.tokens import TokenService
from draftpress.services.users import UserStore

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/signup", response_model=Envelope[AuthResponse], status_code=status.HTTP_201_CREATED
)
async def signup(
    user_data: UserSignup,
    users: Annotated[UserStore, Depends(get_user_store)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
):
    """Register a new user."""
    user = users.create(user_data.email, user_data.password)
    token = tokens.issue(user.id)

    return Envelope(data=AuthResponse(user=UserResponse.model_validate(user), token=token))


@router.post("/login", response_model=Envelope[AuthResponse])
async def login(
    credentials: UserLogin,
    users: Annotated[UserStore, Depends(get_user_store)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
):
    """Login with email and password."""
    user = users.authenticate(credentials.email, credentials.password)
    if user is None:
        raise InvalidCredentials()

    token = tokens.issue(user.id)

    return Envelope(data=AuthResponse(user=UserResponse.model_validate(user), token=token))
