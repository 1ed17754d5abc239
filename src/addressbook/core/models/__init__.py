"""Request, response and context models exchanged between the layers."""

from .address import AddressResponse, CreateAddressRequest, UpdateAddressRequest
from .auth import Auth
from .contact import (
    ContactResponse,
    CreateContactRequest,
    SearchContactRequest,
    UpdateContactRequest,
)
from .user import (
    LoginUserRequest,
    RefreshTokenRequest,
    RegisterUserRequest,
    UpdateUserRequest,
    UserResponse,
)
from .web import ErrorResponse, PagedResponse, PageMetadata, WebResponse

__all__ = [
    "Auth",
    "AddressResponse",
    "CreateAddressRequest",
    "UpdateAddressRequest",
    "ContactResponse",
    "CreateContactRequest",
    "SearchContactRequest",
    "UpdateContactRequest",
    "LoginUserRequest",
    "RefreshTokenRequest",
    "RegisterUserRequest",
    "UpdateUserRequest",
    "UserResponse",
    "ErrorResponse",
    "PagedResponse",
    "PageMetadata",
    "WebResponse",
]
