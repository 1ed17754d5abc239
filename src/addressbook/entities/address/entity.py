"""Address domain entity."""

from pydantic import Field

from src.addressbook.entities._base import SoftDeleteEntity


class Address(SoftDeleteEntity):
    """A postal address attached to a contact."""

    contact_id: str = Field(description="Contact the address belongs to")
    street: str | None = Field(default=None)
    city: str | None = Field(default=None)
    province: str | None = Field(default=None)
    postal_code: str | None = Field(default=None)
    country: str | None = Field(default=None)
