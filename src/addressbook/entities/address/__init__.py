"""Address entity module."""

from .entity import Address
from .repository import AddressRepository
from .table import AddressTable

__all__ = ["Address", "AddressTable", "AddressRepository"]
