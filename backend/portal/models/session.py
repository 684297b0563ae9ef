"""
Session model for server-side sessions.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from portal.models.user import UserType


class SessionData(BaseModel):
    """
    Request-scoped view of a browser session.

    An anonymous session has no id and is never stored. Authenticated
    sessions are persisted with a fixed expiry set at creation.
    """
    id: Optional[str] = Field(None, description="Opaque session identifier")
    authenticated: bool = Field(default=False, description="Logged in flag")
    username: Optional[str] = Field(None, description="Logged in username")
    user_type: Optional[UserType] = Field(None, description="Role at login time")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    expires_at: Optional[datetime] = Field(None, description="Fixed expiry timestamp")

    class Config:
        use_enum_values = True

    @property
    def is_admin(self) -> bool:
        return self.authenticated and self.user_type == UserType.ADMIN.value


def anonymous_session() -> SessionData:
    """Return a fresh, unauthenticated session."""
    return SessionData()
