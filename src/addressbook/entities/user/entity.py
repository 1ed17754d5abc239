"""User domain entity."""

from typing import Any

from pydantic import Field

from src.addressbook.entities._base import Entity


class User(Entity):
    """A registered account.

    Unlike the other entities the identifier is chosen by the user at
    registration. ``token`` and ``refresh_token`` are only populated while a
    session is open.
    """

    id: str = Field(description="Username chosen at registration")
    name: str = Field(description="Display name")
    password: str = Field(description="Password hash", repr=False)
    token: str | None = Field(default=None, description="Current session token", repr=False)
    refresh_token: str | None = Field(
        default=None, description="Token exchanged for a new session", repr=False
    )

    @property
    def is_logged_in(self) -> bool:
        return self.token is not None

    def __eq__(self, other: Any) -> bool:
        """Compare users by business attributes, ignoring timestamps."""
        if not isinstance(other, User):
            return False

        return self.id == other.id and self.name == other.name

    def __hash__(self) -> int:
        return hash((self.id, self.name))
