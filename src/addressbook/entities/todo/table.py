"""Todo database table model.

The table is part of the schema but no endpoint reads or writes it yet.
"""

from sqlmodel import Field

from src.addressbook.entities._base import SoftDeleteEntityTable


class TodoTable(SoftDeleteEntityTable, table=True):
    """Database persistence model for todos."""

    __tablename__ = "todos"  # type: ignore[assignment]

    title: str = Field(max_length=100)
    description: str | None = Field(default=None)
    user_id: str = Field(foreign_key="users.id", index=True, max_length=100)
