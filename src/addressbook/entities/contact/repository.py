"""Contact data-access layer."""

from typing import Any

from sqlalchemy import func, or_
from sqlmodel import col, select

from src.addressbook.entities._base import utc_now
from src.addressbook.entities._repository import Repository
from src.addressbook.entities.contact.entity import Contact
from src.addressbook.entities.contact.table import ContactTable


class ContactRepository(Repository[Contact, ContactTable]):
    """Data-access layer for contacts.

    Every query except the inherited primary-key ``get`` skips soft-deleted
    rows.
    """

    entity_type = Contact
    table_type = ContactTable

    def get_by_id_and_user_id(self, contact_id: str, user_id: str) -> Contact | None:
        statement = select(ContactTable).where(
            ContactTable.id == contact_id,
            ContactTable.user_id == user_id,
            col(ContactTable.deleted_at).is_(None),
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)

    def _search_filters(
        self,
        user_id: str,
        name: str | None,
        email: str | None,
        phone: str | None,
    ) -> list[Any]:
        filters: list[Any] = [
            ContactTable.user_id == user_id,
            col(ContactTable.deleted_at).is_(None),
        ]
        if name:
            filters.append(
                or_(
                    col(ContactTable.first_name).icontains(name, autoescape=True),
                    col(ContactTable.last_name).icontains(name, autoescape=True),
                )
            )
        if email:
            filters.append(col(ContactTable.email).icontains(email, autoescape=True))
        if phone:
            filters.append(col(ContactTable.phone).icontains(phone, autoescape=True))
        return filters

    def search(
        self,
        user_id: str,
        *,
        name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        offset: int = 0,
        limit: int = 10,
    ) -> tuple[list[Contact], int]:
        """Return one page of the user's matching contacts and the total match count.

        Filters are case-insensitive substring matches combined with AND;
        ``name`` matches either the first or the last name. Rows come back
        in creation order. An offset at or past the last match returns an
        empty page without querying rows.
        """
        filters = self._search_filters(user_id, name, email, phone)

        count_statement = select(func.count()).select_from(ContactTable).where(*filters)
        total = self._session.exec(count_statement).one()
        if offset >= total:
            return [], total

        statement = (
            select(ContactTable)
            .where(*filters)
            .order_by(col(ContactTable.created_at), col(ContactTable.id))
            .offset(offset)
            .limit(limit)
        )
        rows = self._session.exec(statement).all()
        return self._to_entities(rows), total

    def soft_delete(self, contact_id: str) -> bool:
        row = self._get_row(contact_id)
        if row is None or row.deleted_at is not None:
            return False
        row.deleted_at = utc_now()
        self._session.add(row)
        self._session.flush()
        return True
