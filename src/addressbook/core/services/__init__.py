"""Core services exports."""

from .auth import PasswordHasher, TokenAuthenticator, generate_secure_token
from .database import DbSessionService

__all__ = [
    # Auth
    "PasswordHasher",
    "TokenAuthenticator",
    "generate_secure_token",
    # Database Service
    "DbSessionService",
]
