"""Contact database table model."""

from sqlmodel import Field

from src.addressbook.entities._base import SoftDeleteEntityTable


class ContactTable(SoftDeleteEntityTable, table=True):
    """Database persistence model for contacts."""

    __tablename__ = "contacts"  # type: ignore[assignment]

    user_id: str = Field(foreign_key="users.id", index=True, max_length=100)
    first_name: str = Field(max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    email: str | None = Field(default=None, max_length=254)
    phone: str | None = Field(default=None, max_length=20)
