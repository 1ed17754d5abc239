"""Address book REST API.

Layered service for managing users, their contacts and the contacts' addresses.
Requests flow through the HTTP delivery layer, the use cases and the
repositories down to the SQL entity store.
"""

__version__ = "0.1.0"
