"""
Core module - Security, errors, and logging utilities.
"""
from portal.core.errors import (
    LoginRequired,
    NotAuthorized,
    redirect,
    register_exception_handlers,
)
from portal.core.logging_config import setup_logging
from portal.core.security import (
    hash_password,
    verify_password,
    sign_session_id,
    unsign_session_id,
    encrypt_session_payload,
    decrypt_session_payload,
)

__all__ = [
    "LoginRequired",
    "NotAuthorized",
    "redirect",
    "register_exception_handlers",
    "setup_logging",
    "hash_password",
    "verify_password",
    "sign_session_id",
    "unsign_session_id",
    "encrypt_session_payload",
    "decrypt_session_payload",
]
