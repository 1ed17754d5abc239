"""Entity to response conversions."""

from src.addressbook.core.models.address import AddressResponse
from src.addressbook.core.models.contact import ContactResponse
from src.addressbook.core.models.user import UserResponse
from src.addressbook.entities import Address, Contact, User


def user_to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def user_to_token_response(user: User) -> UserResponse:
    return UserResponse(token=user.token, refresh_token=user.refresh_token)


def contact_to_response(contact: Contact) -> ContactResponse:
    return ContactResponse.model_validate(contact, from_attributes=True)


def address_to_response(address: Address) -> AddressResponse:
    return AddressResponse.model_validate(address, from_attributes=True)
