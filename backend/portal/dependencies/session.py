"""
Session dependencies.

Every route receives the session as an explicit ``SessionData`` argument
resolved from the signed cookie.
"""
from typing import Annotated, Optional

from fastapi import Depends, Request, Response
from motor.motor_asyncio import AsyncIOMotorDatabase

from portal.config import get_settings
from portal.core.security import sign_session_id
from portal.database.connections import get_database
from portal.models.session import SessionData
from portal.services.auth_service import AuthService
from portal.services.session_service import SessionService


async def get_auth_service(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]
) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(db)


async def get_session_service(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]
) -> SessionService:
    """Dependency to get SessionService instance."""
    return SessionService(db)


async def get_session(
    request: Request,
    session_service: Annotated[SessionService, Depends(get_session_service)],
) -> SessionData:
    """Load the session named by the request's cookie."""
    cookie_value: Optional[str] = request.cookies.get(get_settings().session_cookie_name)
    return await session_service.load(cookie_value)


def set_session_cookie(response: Response, session: SessionData) -> None:
    """Point the browser at a freshly stored session."""
    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=sign_session_id(session.id, session.expires_at),
        max_age=settings.session_expire_minutes * 60,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )


def clear_session_cookie(response: Response) -> None:
    settings = get_settings()
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )


# Type aliases for cleaner route signatures
CurrentSession = Annotated[SessionData, Depends(get_session)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
SessionServiceDep = Annotated[SessionService, Depends(get_session_service)]
