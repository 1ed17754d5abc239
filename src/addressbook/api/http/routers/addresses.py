"""Address API router, nested under the owning contact."""

from fastapi import APIRouter, Depends

from src.addressbook.api.http.auth_gate import AuthGateRoute
from src.addressbook.api.http.deps import get_address_usecase, get_current_user
from src.addressbook.api.http.errors import ERROR_RESPONSES
from src.addressbook.core.models import (
    AddressResponse,
    Auth,
    CreateAddressRequest,
    UpdateAddressRequest,
    WebResponse,
)
from src.addressbook.core.usecases import AddressUseCase

router = APIRouter(
    prefix="/contacts/{contact_id}/addresses",
    tags=["addresses"],
    route_class=AuthGateRoute,
    responses=ERROR_RESPONSES,
)


@router.post("", response_model=WebResponse[AddressResponse])
def create_address(
    contact_id: str,
    request: CreateAddressRequest,
    auth: Auth = Depends(get_current_user),
    usecase: AddressUseCase = Depends(get_address_usecase),
) -> WebResponse[AddressResponse]:
    """Add an address to a contact."""
    return WebResponse(data=usecase.create(auth, contact_id, request))


@router.get("", response_model=WebResponse[list[AddressResponse]])
def list_addresses(
    contact_id: str,
    auth: Auth = Depends(get_current_user),
    usecase: AddressUseCase = Depends(get_address_usecase),
) -> WebResponse[list[AddressResponse]]:
    """List a contact's addresses."""
    return WebResponse(data=usecase.list(auth, contact_id))


@router.get("/{address_id}", response_model=WebResponse[AddressResponse])
def get_address(
    contact_id: str,
    address_id: str,
    auth: Auth = Depends(get_current_user),
    usecase: AddressUseCase = Depends(get_address_usecase),
) -> WebResponse[AddressResponse]:
    return WebResponse(data=usecase.get(auth, contact_id, address_id))


@router.put("/{address_id}", response_model=WebResponse[AddressResponse])
def update_address(
    contact_id: str,
    address_id: str,
    request: UpdateAddressRequest,
    auth: Auth = Depends(get_current_user),
    usecase: AddressUseCase = Depends(get_address_usecase),
) -> WebResponse[AddressResponse]:
    """Update the supplied fields of an address."""
    return WebResponse(data=usecase.update(auth, contact_id, address_id, request))


@router.delete("/{address_id}", response_model=WebResponse[bool])
def delete_address(
    contact_id: str,
    address_id: str,
    auth: Auth = Depends(get_current_user),
    usecase: AddressUseCase = Depends(get_address_usecase),
) -> WebResponse[bool]:
    usecase.delete(auth, contact_id, address_id)
    return WebResponse(data=True)
