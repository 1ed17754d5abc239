"""User data-access layer."""

from sqlmodel import select

from src.addressbook.entities._repository import Repository
from src.addressbook.entities.user.entity import User
from src.addressbook.entities.user.table import UserTable


class UserRepository(Repository[User, UserTable]):
    """Data-access layer for users."""

    entity_type = User
    table_type = UserTable

    def exists(self, user_id: str) -> bool:
        return self._get_row(user_id) is not None

    def get_by_token(self, token: str) -> User | None:
        statement = select(UserTable).where(UserTable.token == token)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)

    def get_by_refresh_token(self, refresh_token: str) -> User | None:
        statement = select(UserTable).where(UserTable.refresh_token == refresh_token)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)
