"""Address data-access layer."""

from sqlmodel import col, select

from src.addressbook.entities._base import utc_now
from src.addressbook.entities._repository import Repository
from src.addressbook.entities.address.entity import Address
from src.addressbook.entities.address.table import AddressTable


class AddressRepository(Repository[Address, AddressTable]):
    """Data-access layer for addresses."""

    entity_type = Address
    table_type = AddressTable

    def get_by_id_and_contact_id(self, address_id: str, contact_id: str) -> Address | None:
        statement = select(AddressTable).where(
            AddressTable.id == address_id,
            AddressTable.contact_id == contact_id,
            col(AddressTable.deleted_at).is_(None),
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)

    def list_by_contact_id(self, contact_id: str) -> list[Address]:
        statement = (
            select(AddressTable)
            .where(
                AddressTable.contact_id == contact_id,
                col(AddressTable.deleted_at).is_(None),
            )
            .order_by(col(AddressTable.created_at), col(AddressTable.id))
        )
        return self._to_entities(self._session.exec(statement).all())

    def soft_delete(self, address_id: str) -> bool:
        row = self._get_row(address_id)
        if row is None or row.deleted_at is not None:
            return False
        row.deleted_at = utc_now()
        self._session.add(row)
        self._session.flush()
        return True

    def soft_delete_by_contact_id(self, contact_id: str) -> int:
        """Soft-delete every live address of a contact; returns how many."""
        statement = select(AddressTable).where(
            AddressTable.contact_id == contact_id,
            col(AddressTable.deleted_at).is_(None),
        )
        rows = self._session.exec(statement).all()
        now = utc_now()
        for row in rows:
            row.deleted_at = now
            self._session.add(row)
        self._session.flush()
        return len(rows)
