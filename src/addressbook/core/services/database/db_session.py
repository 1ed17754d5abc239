"""Database engine and session factory used across the application."""

from typing import Any

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine

from src.addressbook.runtime.config.config_data import ConfigData


class DbSessionService:
    def __init__(self, config: ConfigData):
        """Initialize the shared database engine and session factory."""

        self._config = config
        db_config = config.database

        logger.info("Configuring database engine for environment: {}", config.app.environment)
        engine_kwargs: dict[str, Any] = {
            "echo": db_config.echo,
            "echo_pool": False,
            "connect_args": self._get_connect_args(),
        }

        if db_config.is_memory:
            # One shared connection, otherwise every session sees an empty database
            engine_kwargs["poolclass"] = StaticPool
        elif not db_config.is_sqlite:
            engine_kwargs.update(
                {
                    "pool_size": db_config.pool_size,
                    "max_overflow": db_config.max_overflow,
                    "pool_timeout": db_config.pool_timeout,
                    "pool_recycle": db_config.pool_recycle,
                    "pool_pre_ping": True,
                }
            )

        self._engine = create_engine(db_config.url, **engine_kwargs)

    @property
    def engine(self):
        return self._engine

    def _get_connect_args(self) -> dict:
        """Get database-specific connection arguments."""
        connect_args: dict[str, Any] = {}

        if "postgresql" in self._config.database.url:
            connect_args.update(
                {
                    "application_name": f"{self._config.app.name}_{self._config.app.environment}",
                    "connect_timeout": 30,
                }
            )

        elif self._config.database.is_sqlite:
            connect_args.update(
                {
                    "check_same_thread": False,
                    "timeout": 20,
                }
            )

            if self._config.app.environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )

        return connect_args

    def create_all(self) -> None:
        """Create every table registered with the SQLModel metadata."""
        import src.addressbook.entities  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,
            autoflush=True,
        )

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except SQLAlchemyError as e:
            logger.error("Database health check failed: {}: {}", type(e).__name__, e)
            return False

    def dispose(self) -> None:
        self._engine.dispose()
