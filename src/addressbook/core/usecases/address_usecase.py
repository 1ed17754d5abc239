"""Address management, reachable only through a contact the caller owns."""

from loguru import logger
from sqlmodel import Session

from src.addressbook.core.exceptions import NotFound
from src.addressbook.core.models.address import (
    AddressResponse,
    CreateAddressRequest,
    UpdateAddressRequest,
)
from src.addressbook.core.models.auth import Auth
from src.addressbook.core.models.converter import address_to_response
from src.addressbook.core.usecases._base import UseCase
from src.addressbook.entities.address import Address, AddressRepository
from src.addressbook.entities.contact import Contact, ContactRepository
from src.addressbook.runtime.config.config_data import ConfigData


class AddressUseCase(UseCase):
    def __init__(self, session: Session, config: ConfigData) -> None:
        super().__init__(session, config)
        self._contact_repo = ContactRepository(session)
        self._address_repo = AddressRepository(session)

    def _get_contact(self, auth: Auth, contact_id: str) -> Contact:
        contact = self._contact_repo.get_by_id_and_user_id(contact_id, auth.id)
        if contact is None:
            logger.warning("Contact {} not found for user {}", contact_id, auth.id)
            raise NotFound("Contact not found")
        return contact

    def _get_address(self, auth: Auth, contact_id: str, address_id: str) -> Address:
        contact = self._get_contact(auth, contact_id)
        address = self._address_repo.get_by_id_and_contact_id(address_id, contact.id)
        if address is None:
            logger.warning("Address {} not found for contact {}", address_id, contact_id)
            raise NotFound("Address not found")
        return address

    def create(
        self, auth: Auth, contact_id: str, request: CreateAddressRequest
    ) -> AddressResponse:
        with self._transaction():
            contact = self._get_contact(auth, contact_id)
            address = self._address_repo.create(
                Address(contact_id=contact.id, **request.model_dump())
            )
        return address_to_response(address)

    def list(self, auth: Auth, contact_id: str) -> list[AddressResponse]:
        contact = self._get_contact(auth, contact_id)
        return [
            address_to_response(address)
            for address in self._address_repo.list_by_contact_id(contact.id)
        ]

    def get(self, auth: Auth, contact_id: str, address_id: str) -> AddressResponse:
        return address_to_response(self._get_address(auth, contact_id, address_id))

    def update(
        self,
        auth: Auth,
        contact_id: str,
        address_id: str,
        request: UpdateAddressRequest,
    ) -> AddressResponse:
        with self._transaction():
            address = self._get_address(auth, contact_id, address_id)
            for field, value in request.model_dump(exclude_unset=True).items():
                setattr(address, field, value)
            address = self._address_repo.update(address)
        return address_to_response(address)

    def delete(self, auth: Auth, contact_id: str, address_id: str) -> None:
        with self._transaction():
            address = self._get_address(auth, contact_id, address_id)
            self._address_repo.soft_delete(address.id)
