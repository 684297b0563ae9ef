"""
Authentication dependencies for route protection.
"""
from typing import Annotated

from fastapi import Depends

from portal.core.errors import LoginRequired
from portal.dependencies.session import get_session
from portal.models.session import SessionData


async def require_auth(
    session: Annotated[SessionData, Depends(get_session)]
) -> SessionData:
    """
    Dependency that lets only authenticated sessions through.

    Raises:
        LoginRequired: Redirects anonymous visitors to the home page
    """
    if not session.authenticated:
        raise LoginRequired("/")
    return session


# Type alias for cleaner route signatures
AuthenticatedSession = Annotated[SessionData, Depends(require_auth)]
