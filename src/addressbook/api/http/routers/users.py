"""User API router: registration, login, profile and session management."""

from fastapi import APIRouter, Depends

from src.addressbook.api.http.auth_gate import AuthGateRoute
from src.addressbook.api.http.deps import get_current_user, get_user_usecase
from src.addressbook.api.http.errors import ERROR_RESPONSES
from src.addressbook.core.models import (
    Auth,
    LoginUserRequest,
    RefreshTokenRequest,
    RegisterUserRequest,
    UpdateUserRequest,
    UserResponse,
    WebResponse,
)
from src.addressbook.core.usecases import UserUseCase

router = APIRouter(
    prefix="/users",
    tags=["users"],
    route_class=AuthGateRoute,
    responses=ERROR_RESPONSES,
)


@router.post(
    "", response_model=WebResponse[UserResponse], response_model_exclude_none=True
)
def register(
    request: RegisterUserRequest,
    usecase: UserUseCase = Depends(get_user_usecase),
) -> WebResponse[UserResponse]:
    """Register a new user."""
    return WebResponse(data=usecase.create(request))


@router.post(
    "/_login", response_model=WebResponse[UserResponse], response_model_exclude_none=True
)
def login(
    request: LoginUserRequest,
    usecase: UserUseCase = Depends(get_user_usecase),
) -> WebResponse[UserResponse]:
    """Exchange credentials for a session token and a refresh token."""
    return WebResponse(data=usecase.login(request))


@router.post(
    "/refresh-token",
    response_model=WebResponse[UserResponse],
    response_model_exclude_none=True,
)
def refresh_token(
    request: RefreshTokenRequest,
    usecase: UserUseCase = Depends(get_user_usecase),
) -> WebResponse[UserResponse]:
    """Exchange a refresh token for a new token pair."""
    return WebResponse(data=usecase.refresh_token(request))


@router.get(
    "/_current", response_model=WebResponse[UserResponse], response_model_exclude_none=True
)
def current(
    auth: Auth = Depends(get_current_user),
    usecase: UserUseCase = Depends(get_user_usecase),
) -> WebResponse[UserResponse]:
    """Get the authenticated user's profile."""
    return WebResponse(data=usecase.current(auth))


@router.patch(
    "/_current", response_model=WebResponse[UserResponse], response_model_exclude_none=True
)
def update(
    request: UpdateUserRequest,
    auth: Auth = Depends(get_current_user),
    usecase: UserUseCase = Depends(get_user_usecase),
) -> WebResponse[UserResponse]:
    """Change the authenticated user's name and/or password."""
    return WebResponse(data=usecase.update(auth, request))


@router.delete("", response_model=WebResponse[bool])
def logout(
    auth: Auth = Depends(get_current_user),
    usecase: UserUseCase = Depends(get_user_usecase),
) -> WebResponse[bool]:
    """Log out and invalidate the current token pair."""
    return WebResponse(data=usecase.logout(auth))
