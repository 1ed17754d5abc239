"""Address request and response models."""

from datetime import datetime

from pydantic import BaseModel, Field


class CreateAddressRequest(BaseModel):
    street: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=255)
    province: str | None = Field(default=None, max_length=255)
    postal_code: str | None = Field(default=None, max_length=10)
    country: str | None = Field(default=None, max_length=100)


class UpdateAddressRequest(CreateAddressRequest):
    """Partial update; only the fields present in the body are applied."""


class AddressResponse(BaseModel):
    id: str
    street: str | None = None
    city: str | None = None
    province: str | None = None
    postal_code: str | None = None
    country: str | None = None
    created_at: datetime
    updated_at: datetime
