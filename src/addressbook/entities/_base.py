import uuid
from datetime import UTC, datetime

from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    return datetime.now(UTC)


class Entity(BaseModel):
    """Base entity class with auto-generated UUID identifier."""

    id: str = PydanticField(
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique identifier for the entity",
    )

    created_at: datetime = PydanticField(default_factory=utc_now)
    updated_at: datetime = PydanticField(default_factory=utc_now)


class SoftDeleteEntity(Entity):
    """Entity that is hidden rather than removed when deleted."""

    deleted_at: datetime | None = PydanticField(default=None)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


class EntityTable(SQLModel, table=False):
    """Base table with a UUID primary key and bookkeeping timestamps."""

    id: str = Field(
        primary_key=True,
        max_length=100,
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique identifier for the entity",
    )

    created_at: datetime = Field(default_factory=utc_now, nullable=False)
    updated_at: datetime = Field(default_factory=utc_now, nullable=False)


class SoftDeleteEntityTable(EntityTable, table=False):
    """Base table for rows that carry a nullable deletion timestamp."""

    deleted_at: datetime | None = Field(default=None, index=True)
