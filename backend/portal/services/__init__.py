"""
Service layer for business logic.
"""
from portal.services.auth_service import AuthService
from portal.services.session_service import SessionService

__all__ = [
    "AuthService",
    "SessionService",
]
