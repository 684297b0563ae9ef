"""
Dependencies for dependency injection in routes.
"""
from portal.dependencies.auth import AuthenticatedSession, require_auth
from portal.dependencies.roles import AdminSession, require_admin
from portal.dependencies.session import (
    AuthServiceDep,
    CurrentSession,
    SessionServiceDep,
    clear_session_cookie,
    get_auth_service,
    get_session,
    get_session_service,
    set_session_cookie,
)

__all__ = [
    "AuthenticatedSession",
    "require_auth",
    "AdminSession",
    "require_admin",
    "AuthServiceDep",
    "CurrentSession",
    "SessionServiceDep",
    "clear_session_cookie",
    "get_auth_service",
    "get_session",
    "get_session_service",
    "set_session_cookie",
]
