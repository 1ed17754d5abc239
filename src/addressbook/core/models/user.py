"""User request and response models."""

from datetime import datetime

from pydantic import BaseModel, Field


class RegisterUserRequest(BaseModel):
    id: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=100)
    name: str = Field(min_length=1, max_length=100)


class LoginUserRequest(BaseModel):
    id: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=100)


class UpdateUserRequest(BaseModel):
    """Fields left out of the request body keep their current value."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    password: str | None = Field(default=None, min_length=1, max_length=100)


class RefreshTokenRequest(BaseModel):
    refresh_token: str = Field(min_length=1)


class UserResponse(BaseModel):
    """Profile or token pair, depending on the operation.

    Unset members are dropped from the serialized body.
    """

    id: str | None = None
    name: str | None = None
    token: str | None = None
    refresh_token: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
