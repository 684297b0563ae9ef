"""
Security utilities for password hashing and session cookie protection.
"""
import base64
import hashlib
import json
import secrets
from datetime import datetime
from functools import lru_cache
from typing import Any, Optional

from cryptography.fernet import Fernet, InvalidToken
from jose import JWTError, jwt
from passlib.context import CryptContext

from portal.config import get_settings

# Password hashing context using bcrypt
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=get_settings().bcrypt_rounds,
)


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt.

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    return pwd_context.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Malformed hashes count as a mismatch.

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if password matches, False otherwise
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False


@lru_cache(maxsize=1)
def dummy_password_hash() -> str:
    """
    Hash checked against when no user matches an email.

    Unknown emails then cost one bcrypt verification, like wrong passwords.
    """
    return hash_password(secrets.token_urlsafe(16))


def sign_session_id(session_id: str, expires_at: datetime) -> str:
    """
    Sign a session id for use as a cookie value.

    Args:
        session_id: Opaque session identifier
        expires_at: Session expiry, also the token expiry

    Returns:
        Encoded signed token string
    """
    settings = get_settings()
    payload = {"sid": session_id, "exp": expires_at}
    return jwt.encode(
        payload,
        settings.session_secret,
        algorithm=settings.session_signing_algorithm,
    )


def unsign_session_id(token: str) -> Optional[str]:
    """
    Recover the session id from a signed cookie value.

    Returns:
        The session id, or None if the signature is bad or expired
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.session_secret,
            algorithms=[settings.session_signing_algorithm],
        )
    except JWTError:
        return None
    session_id = payload.get("sid")
    return session_id if isinstance(session_id, str) else None


@lru_cache(maxsize=4)
def _fernet_for(secret: str) -> Fernet:
    # Fernet wants 32 url-safe base64 bytes; derive them from the secret
    key = base64.urlsafe_b64encode(hashlib.sha256(secret.encode("utf-8")).digest())
    return Fernet(key)


def encrypt_session_payload(payload: dict[str, Any]) -> str:
    """Encrypt a session payload for storage."""
    fernet = _fernet_for(get_settings().session_encryption_secret)
    raw = json.dumps(payload, default=str).encode("utf-8")
    return fernet.encrypt(raw).decode("utf-8")


def decrypt_session_payload(ciphertext: str) -> Optional[dict[str, Any]]:
    """
    Decrypt a stored session payload.

    Returns:
        The payload dict, or None if it was encrypted with another key
        or is corrupted
    """
    fernet = _fernet_for(get_settings().session_encryption_secret)
    try:
        raw = fernet.decrypt(ciphertext.encode("utf-8"))
    except InvalidToken:
        return None
    try:
        payload = json.loads(raw)
    except ValueError:
        return None
    return payload if isinstance(payload, dict) else None
