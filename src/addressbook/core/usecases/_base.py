from collections.abc import Iterator
from contextlib import contextmanager

from sqlmodel import Session

from src.addressbook.runtime.config.config_data import ConfigData


class UseCase:
    """Shared plumbing for use cases: the request's session and the app config."""

    def __init__(self, session: Session, config: ConfigData) -> None:
        self._session = session
        self._config = config

    @contextmanager
    def _transaction(self) -> Iterator[Session]:
        """Commit the work done inside the block, or roll all of it back."""
        try:
            yield self._session
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
