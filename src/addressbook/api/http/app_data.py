from dataclasses import dataclass

from src.addressbook.core.services import DbSessionService, PasswordHasher
from src.addressbook.runtime.config.config_data import ConfigData


@dataclass
class ApplicationDependencies:
    """Process-wide collaborators built once by the application factory."""

    config: ConfigData
    database_service: DbSessionService
    password_hasher: PasswordHasher


def build_dependencies(config: ConfigData) -> ApplicationDependencies:
    return ApplicationDependencies(
        config=config,
        database_service=DbSessionService(config),
        password_hasher=PasswordHasher(config.security),
    )
