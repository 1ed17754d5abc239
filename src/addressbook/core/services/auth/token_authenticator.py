"""Opaque session token lifecycle: verification, issuance, refresh and revocation."""

from loguru import logger
from sqlmodel import Session

from src.addressbook.core.exceptions import Unauthorized
from src.addressbook.core.models.auth import Auth
from src.addressbook.core.services.auth.tokens import generate_secure_token
from src.addressbook.entities.user import User, UserRepository
from src.addressbook.runtime.config.config_data import SecurityConfig


class TokenAuthenticator:
    """Resolves bearer tokens to users and manages the stored token pair.

    A user holds at most one session token and one refresh token. Tokens do
    not expire; they stop working when the user logs out or exchanges the
    refresh token for a new pair.
    """

    def __init__(self, session: Session, config: SecurityConfig) -> None:
        self._session = session
        self._config = config
        self._user_repo = UserRepository(session)

    def authenticate(self, token: str | None) -> Auth:
        """Return the caller owning ``token``.

        Raises:
            Unauthorized: if the token is missing, blank or matches no user.
        """
        if token is None or not token.strip():
            raise Unauthorized("Missing token")

        user = self._user_repo.get_by_token(token)
        if user is None:
            logger.debug("Rejected unknown session token")
            raise Unauthorized("Invalid token")

        return Auth(id=user.id)

    def issue(self, user: User) -> User:
        """Store and return a fresh token pair for ``user``; the previous pair stops working."""
        issued = user.model_copy(
            update={
                "token": generate_secure_token(self._config.token_bytes),
                "refresh_token": generate_secure_token(self._config.token_bytes),
            }
        )
        return self._user_repo.update(issued)

    def refresh(self, refresh_token: str | None) -> User:
        """Exchange a refresh token for a new token pair.

        Raises:
            Unauthorized: if the refresh token is blank or matches no user.
        """
        if refresh_token is None or not refresh_token.strip():
            raise Unauthorized("Missing refresh token")

        user = self._user_repo.get_by_refresh_token(refresh_token)
        if user is None:
            raise Unauthorized("Invalid refresh token")

        logger.info("Refreshing session token for user {}", user.id)
        return self.issue(user)

    def revoke(self, user: User) -> User:
        return self._user_repo.update(
            user.model_copy(update={"token": None, "refresh_token": None})
        )
