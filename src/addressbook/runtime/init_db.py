"""Database initialization script."""

from src.addressbook.core.services.database import DbSessionService
from src.addressbook.runtime.config.config_data import ConfigData
from src.addressbook.runtime.config.config_template import load_config


def init_db(config: ConfigData | None = None) -> None:
    """Create all database tables."""
    db_service = DbSessionService(config or load_config())
    try:
        db_service.create_all()
    finally:
        db_service.dispose()


if __name__ == "__main__":
    init_db()
