"""Generic data-access layer shared by every entity repository."""

from collections.abc import Sequence
from typing import Any, ClassVar, Generic, TypeVar

from sqlmodel import Session

from src.addressbook.entities._base import Entity, EntityTable, utc_now

EntityT = TypeVar("EntityT", bound=Entity)
TableT = TypeVar("TableT", bound=EntityTable)


class Repository(Generic[EntityT, TableT]):
    """CRUD operations for one entity type backed by its table model.

    Subclasses bind ``entity_type`` and ``table_type`` and add the queries
    specific to their entity. Repositories flush but never commit; the
    caller owns the transaction.
    """

    entity_type: ClassVar[type[Entity]]
    table_type: ClassVar[type[EntityTable]]

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, row: Any) -> EntityT:
        return self.entity_type.model_validate(row, from_attributes=True)  # type: ignore[return-value]

    def _to_entities(self, rows: Sequence[Any]) -> list[EntityT]:
        return [self._to_entity(row) for row in rows]

    def _get_row(self, entity_id: str) -> TableT | None:
        return self._session.get(self.table_type, entity_id)  # type: ignore[return-value]

    def create(self, entity: EntityT) -> EntityT:
        row = self.table_type.model_validate(entity.model_dump())
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def get(self, entity_id: str) -> EntityT | None:
        row = self._get_row(entity_id)
        if row is None:
            return None
        return self._to_entity(row)

    def update(self, entity: EntityT) -> EntityT:
        """Persist every mutable field of ``entity`` and bump ``updated_at``."""
        row = self._get_row(entity.id)
        if row is None:
            raise ValueError(
                f"{self.entity_type.__name__} with id {entity.id} not found"
            )

        for key, value in entity.model_dump(exclude={"id", "created_at"}).items():
            setattr(row, key, value)
        row.updated_at = utc_now()

        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def delete(self, entity_id: str) -> bool:
        row = self._get_row(entity_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True
