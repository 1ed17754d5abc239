from .db_session import DbSessionService

__all__ = ["DbSessionService"]
