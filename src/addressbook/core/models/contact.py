"""Contact request and response models."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field


class CreateContactRequest(BaseModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=20)


class UpdateContactRequest(BaseModel):
    """Partial update; only the fields present in the body are applied."""

    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=20)


class SearchContactRequest(BaseModel):
    user_id: str
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    page: int = 1
    size: int = 10


class ContactResponse(BaseModel):
    id: str
    first_name: str
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    created_at: datetime
    updated_at: datetime
