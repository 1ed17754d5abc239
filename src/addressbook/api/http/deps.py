"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request, Security
from fastapi.security import APIKeyHeader
from sqlmodel import Session

from src.addressbook.api.http.app_data import ApplicationDependencies
from src.addressbook.core.models.auth import Auth
from src.addressbook.core.services import PasswordHasher, TokenAuthenticator
from src.addressbook.core.usecases import AddressUseCase, ContactUseCase, UserUseCase
from src.addressbook.runtime.config.config_data import ConfigData

# Raw session token, no "Bearer" prefix
token_header = APIKeyHeader(name="Authorization", auto_error=False)


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_config(deps: ApplicationDependencies = Depends(get_app_dependencies)) -> ConfigData:
    """Get the configuration the application was built with."""
    return deps.config


def get_db_session(
    deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> Iterator[Session]:
    """Yield one database session per request, rolled back if left uncommitted."""
    session = deps.database_service.get_session()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


def get_password_hasher(
    deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> PasswordHasher:
    return deps.password_hasher


def get_token_authenticator(
    db: Session = Depends(get_db_session),
    config: ConfigData = Depends(get_config),
) -> TokenAuthenticator:
    return TokenAuthenticator(db, config.security)


def get_current_user(
    request: Request,
    token: str | None = Security(token_header),
    authenticator: TokenAuthenticator = Depends(get_token_authenticator),
) -> Auth:
    """Gate for protected routes.

    The ``Authorization`` header carries the raw session token. Routes served
    by ``AuthGateRoute`` have already resolved the caller before the body was
    read; otherwise the token is checked here. On success the caller is on
    ``request.state.auth``; on failure ``Unauthorized`` is raised before the
    route handler runs.
    """
    auth = getattr(request.state, "auth", None)
    if auth is None:
        auth = authenticator.authenticate(token)
        request.state.auth = auth
    return auth


def get_user_usecase(
    db: Session = Depends(get_db_session),
    config: ConfigData = Depends(get_config),
    authenticator: TokenAuthenticator = Depends(get_token_authenticator),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserUseCase:
    return UserUseCase(db, config, authenticator, hasher)


def get_contact_usecase(
    db: Session = Depends(get_db_session),
    config: ConfigData = Depends(get_config),
) -> ContactUseCase:
    return ContactUseCase(db, config)


def get_address_usecase(
    db: Session = Depends(get_db_session),
    config: ConfigData = Depends(get_config),
) -> AddressUseCase:
    return AddressUseCase(db, config)
