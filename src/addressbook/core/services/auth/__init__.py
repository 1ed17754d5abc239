from .password import PasswordHasher
from .token_authenticator import TokenAuthenticator
from .tokens import generate_secure_token

__all__ = ["PasswordHasher", "TokenAuthenticator", "generate_secure_token"]
