"""Contact domain entity."""

from pydantic import Field

from src.addressbook.entities._base import SoftDeleteEntity


class Contact(SoftDeleteEntity):
    """A person in a user's address book.

    Contacts belong to exactly one user and are only visible to that user.
    """

    user_id: str = Field(description="Owning user")
    first_name: str = Field(description="Contact's first name")
    last_name: str | None = Field(default=None, description="Contact's last name")
    email: str | None = Field(default=None, description="Contact's email address")
    phone: str | None = Field(default=None, description="Contact's phone number")

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)
