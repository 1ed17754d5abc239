"""Password hashing backed by passlib."""

from loguru import logger
from passlib.context import CryptContext

from src.addressbook.runtime.config.config_data import SecurityConfig


class PasswordHasher:
    """Hashes and verifies user passwords.

    The first configured scheme hashes new passwords; hashes produced by
    the other schemes still verify.
    """

    def __init__(self, config: SecurityConfig) -> None:
        self._context = CryptContext(schemes=config.password_schemes, deprecated="auto")

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, hashed_password: str) -> bool:
        try:
            return self._context.verify(password, hashed_password)
        except (ValueError, TypeError) as e:
            # Unrecognised or corrupt hash
            logger.warning("Password hash could not be verified: {}", e)
            return False
