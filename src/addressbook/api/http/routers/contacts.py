"""Contact API router with CRUD and paginated search."""

from fastapi import APIRouter, Depends, Query

from src.addressbook.api.http.auth_gate import AuthGateRoute
from src.addressbook.api.http.deps import get_contact_usecase, get_current_user
from src.addressbook.api.http.errors import ERROR_RESPONSES
from src.addressbook.core.models import (
    Auth,
    ContactResponse,
    CreateContactRequest,
    PagedResponse,
    SearchContactRequest,
    UpdateContactRequest,
    WebResponse,
)
from src.addressbook.core.usecases import ContactUseCase

router = APIRouter(
    prefix="/contacts",
    tags=["contacts"],
    route_class=AuthGateRoute,
    responses=ERROR_RESPONSES,
)


@router.post("", response_model=WebResponse[ContactResponse])
def create_contact(
    request: CreateContactRequest,
    auth: Auth = Depends(get_current_user),
    usecase: ContactUseCase = Depends(get_contact_usecase),
) -> WebResponse[ContactResponse]:
    """Create a contact for the authenticated user."""
    return WebResponse(data=usecase.create(auth, request))


@router.get("", response_model=PagedResponse[ContactResponse])
def list_contacts(
    name: str | None = Query(default=None, description="Filter by first or last name"),
    email: str | None = Query(default=None, description="Filter by email"),
    phone: str | None = Query(default=None, description="Filter by phone"),
    page: int = Query(default=1, description="Page number"),
    size: int = Query(default=10, description="Page size"),
    auth: Auth = Depends(get_current_user),
    usecase: ContactUseCase = Depends(get_contact_usecase),
) -> PagedResponse[ContactResponse]:
    """Search the authenticated user's contacts, one page at a time."""
    request = SearchContactRequest(
        user_id=auth.id, name=name, email=email, phone=phone, page=page, size=size
    )
    contacts, paging = usecase.search(request)
    return PagedResponse(data=contacts, paging=paging)


@router.get("/{contact_id}", response_model=WebResponse[ContactResponse])
def get_contact(
    contact_id: str,
    auth: Auth = Depends(get_current_user),
    usecase: ContactUseCase = Depends(get_contact_usecase),
) -> WebResponse[ContactResponse]:
    """Get one of the authenticated user's contacts."""
    return WebResponse(data=usecase.get(auth, contact_id))


@router.put("/{contact_id}", response_model=WebResponse[ContactResponse])
def update_contact(
    contact_id: str,
    request: UpdateContactRequest,
    auth: Auth = Depends(get_current_user),
    usecase: ContactUseCase = Depends(get_contact_usecase),
) -> WebResponse[ContactResponse]:
    """Update the supplied fields of a contact."""
    return WebResponse(data=usecase.update(auth, contact_id, request))


@router.delete("/{contact_id}", response_model=WebResponse[bool])
def delete_contact(
    contact_id: str,
    auth: Auth = Depends(get_current_user),
    usecase: ContactUseCase = Depends(get_contact_usecase),
) -> WebResponse[bool]:
    """Delete a contact and its addresses."""
    usecase.delete(auth, contact_id)
    return WebResponse(data=True)
