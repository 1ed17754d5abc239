"""User database table model."""

from sqlmodel import Field

from src.addressbook.entities._base import EntityTable


class UserTable(EntityTable, table=True):
    """Database persistence model for users.

    This represents how the User entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "users"  # type: ignore[assignment]

    id: str = Field(primary_key=True, max_length=100)
    name: str = Field(max_length=100)
    password: str = Field(max_length=255)
    token: str | None = Field(default=None, max_length=255, index=True)
    refresh_token: str | None = Field(default=None, max_length=255, index=True)
