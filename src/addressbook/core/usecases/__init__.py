"""Use cases: one per entity, orchestrating validation, ownership and persistence."""

from .address_usecase import AddressUseCase
from .contact_usecase import ContactUseCase
from .user_usecase import UserUseCase

__all__ = ["AddressUseCase", "ContactUseCase", "UserUseCase"]
