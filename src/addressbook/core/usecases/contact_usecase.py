"""Contact management and search, scoped to the authenticated user."""

from loguru import logger
from sqlmodel import Session

from src.addressbook.core.exceptions import NotFound
from src.addressbook.core.models.auth import Auth
from src.addressbook.core.models.contact import (
    ContactResponse,
    CreateContactRequest,
    SearchContactRequest,
    UpdateContactRequest,
)
from src.addressbook.core.models.converter import contact_to_response
from src.addressbook.core.models.web import PageMetadata
from src.addressbook.core.usecases._base import UseCase
from src.addressbook.entities.address import AddressRepository
from src.addressbook.entities.contact import Contact, ContactRepository
from src.addressbook.runtime.config.config_data import ConfigData

# Columns that may not be cleared by an update
_REQUIRED_FIELDS = {"first_name"}


class ContactUseCase(UseCase):
    def __init__(self, session: Session, config: ConfigData) -> None:
        super().__init__(session, config)
        self._contact_repo = ContactRepository(session)
        self._address_repo = AddressRepository(session)

    def get_owned(self, auth: Auth, contact_id: str) -> Contact:
        """Load a live contact of the caller; foreign and missing contacts look the same."""
        contact = self._contact_repo.get_by_id_and_user_id(contact_id, auth.id)
        if contact is None:
            logger.warning("Contact {} not found for user {}", contact_id, auth.id)
            raise NotFound("Contact not found")
        return contact

    def create(self, auth: Auth, request: CreateContactRequest) -> ContactResponse:
        with self._transaction():
            contact = self._contact_repo.create(
                Contact(user_id=auth.id, **request.model_dump())
            )
        return contact_to_response(contact)

    def get(self, auth: Auth, contact_id: str) -> ContactResponse:
        return contact_to_response(self.get_owned(auth, contact_id))

    def update(
        self, auth: Auth, contact_id: str, request: UpdateContactRequest
    ) -> ContactResponse:
        with self._transaction():
            contact = self.get_owned(auth, contact_id)
            for field, value in request.model_dump(exclude_unset=True).items():
                if value is None and field in _REQUIRED_FIELDS:
                    continue
                setattr(contact, field, value)
            contact = self._contact_repo.update(contact)
        return contact_to_response(contact)

    def delete(self, auth: Auth, contact_id: str) -> None:
        """Soft-delete the contact together with its addresses."""
        with self._transaction():
            contact = self.get_owned(auth, contact_id)
            removed = self._address_repo.soft_delete_by_contact_id(contact.id)
            self._contact_repo.soft_delete(contact.id)
        logger.info("Deleted contact {} and {} address(es)", contact_id, removed)

    def search(
        self, request: SearchContactRequest
    ) -> tuple[list[ContactResponse], PageMetadata]:
        """Return one page of the user's contacts and its paging metadata.

        A page below 1 is read as 1 and a size of 0 or less as the configured
        default; sizes above the configured maximum are capped. Pages past the
        end come back empty.
        """
        pagination = self._config.pagination
        page = max(request.page, 1)
        size = request.size if request.size > 0 else pagination.default_size
        size = min(size, pagination.max_size)

        contacts, total = self._contact_repo.search(
            request.user_id,
            name=request.name,
            email=request.email,
            phone=request.phone,
            offset=(page - 1) * size,
            limit=size,
        )

        responses = [contact_to_response(contact) for contact in contacts]
        return responses, PageMetadata.build(page=page, size=size, total_item=total)
