"""
Pydantic models for database documents and data structures.
"""
from portal.models.user import User, UserType
from portal.models.session import SessionData, anonymous_session

__all__ = [
    "User",
    "UserType",
    "SessionData",
    "anonymous_session",
]
