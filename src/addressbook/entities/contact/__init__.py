"""Contact entity module."""

from .entity import Contact
from .repository import ContactRepository
from .table import ContactTable

__all__ = ["Contact", "ContactTable", "ContactRepository"]
