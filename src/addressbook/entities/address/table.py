"""Address database table model."""

from sqlmodel import Field

from src.addressbook.entities._base import SoftDeleteEntityTable


class AddressTable(SoftDeleteEntityTable, table=True):
    """Database persistence model for addresses."""

    __tablename__ = "addresses"  # type: ignore[assignment]

    contact_id: str = Field(foreign_key="contacts.id", index=True, max_length=100)
    street: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=255)
    province: str | None = Field(default=None, max_length=255)
    postal_code: str | None = Field(default=None, max_length=10)
    country: str | None = Field(default=None, max_length=100)
