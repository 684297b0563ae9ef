"""
Role-based access control dependencies.
"""
from typing import Annotated

from fastapi import Depends

from portal.core.errors import LoginRequired, NotAuthorized
from portal.dependencies.session import get_session
from portal.models.session import SessionData
from portal.models.user import UserType


async def require_admin(
    session: Annotated[SessionData, Depends(get_session)]
) -> SessionData:
    """
    Dependency for admin-only routes.

    Anonymous visitors go to the login page, not home as with
    ``require_auth``.

    Usage:
        @router.get("/admin")
        async def admin_route(session: AdminSession):
            ...

    Raises:
        LoginRequired: Session is not authenticated
        NotAuthorized: Session role is not admin
    """
    if not session.authenticated:
        raise LoginRequired("/login")

    if session.user_type != UserType.ADMIN.value:
        raise NotAuthorized()

    return session


# Type alias for cleaner route signatures
AdminSession = Annotated[SessionData, Depends(require_admin)]
