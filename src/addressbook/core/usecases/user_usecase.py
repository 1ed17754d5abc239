"""Registration, login and profile management."""

from loguru import logger
from sqlmodel import Session

from src.addressbook.core.exceptions import Conflict, NotFound, Unauthorized
from src.addressbook.core.models.auth import Auth
from src.addressbook.core.models.converter import user_to_response, user_to_token_response
from src.addressbook.core.models.user import (
    LoginUserRequest,
    RefreshTokenRequest,
    RegisterUserRequest,
    UpdateUserRequest,
    UserResponse,
)
from src.addressbook.core.services.auth import PasswordHasher, TokenAuthenticator
from src.addressbook.core.usecases._base import UseCase
from src.addressbook.entities.user import User, UserRepository
from src.addressbook.runtime.config.config_data import ConfigData


class UserUseCase(UseCase):
    def __init__(
        self,
        session: Session,
        config: ConfigData,
        authenticator: TokenAuthenticator,
        hasher: PasswordHasher,
    ) -> None:
        super().__init__(session, config)
        self._authenticator = authenticator
        self._hasher = hasher
        self._user_repo = UserRepository(session)

    def _get_user(self, user_id: str) -> User:
        user = self._user_repo.get(user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    def create(self, request: RegisterUserRequest) -> UserResponse:
        """Register a new account; the id must not be taken."""
        with self._transaction():
            if self._user_repo.exists(request.id):
                logger.warning("User {} already exists", request.id)
                raise Conflict("User already exists")

            user = self._user_repo.create(
                User(
                    id=request.id,
                    name=request.name,
                    password=self._hasher.hash(request.password),
                )
            )

        logger.info("Registered user {}", user.id)
        return user_to_response(user)

    def login(self, request: LoginUserRequest) -> UserResponse:
        with self._transaction():
            user = self._user_repo.get(request.id)
            if user is None or not self._hasher.verify(request.password, user.password):
                logger.warning("Failed login for user {}", request.id)
                raise Unauthorized("Invalid id or password")

            user = self._authenticator.issue(user)

        return user_to_token_response(user)

    def current(self, auth: Auth) -> UserResponse:
        return user_to_response(self._get_user(auth.id))

    def update(self, auth: Auth, request: UpdateUserRequest) -> UserResponse:
        with self._transaction():
            user = self._get_user(auth.id)
            if request.name is not None:
                user.name = request.name
            if request.password is not None:
                user.password = self._hasher.hash(request.password)
            user = self._user_repo.update(user)

        return user_to_response(user)

    def logout(self, auth: Auth) -> bool:
        with self._transaction():
            self._authenticator.revoke(self._get_user(auth.id))

        logger.info("User {} logged out", auth.id)
        return True

    def refresh_token(self, request: RefreshTokenRequest) -> UserResponse:
        with self._transaction():
            user = self._authenticator.refresh(request.refresh_token)

        return user_to_token_response(user)
