"""
Server-side session store backed by MongoDB.

Each stored document holds the encrypted session payload and a fixed
expiry. The browser only ever sees the signed session id.
"""
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import ValidationError

from portal.config import get_settings
from portal.core.security import (
    decrypt_session_payload,
    encrypt_session_payload,
    unsign_session_id,
)
from portal.database.databases import portal_db
from portal.models.session import SessionData, anonymous_session
from portal.models.user import User

logger = logging.getLogger(__name__)

# Fields kept inside the encrypted payload
PAYLOAD_FIELDS = {"authenticated", "username", "user_type", "created_at"}


def _as_utc(value) -> Optional[datetime]:
    # MongoDB hands back naive UTC datetimes
    if not isinstance(value, datetime):
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SessionService:
    """Service for session lifecycle operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the portal database."""
        self.db = db
        self.sessions_collection = db[portal_db.Collections.SESSIONS]
        self.settings = get_settings()

    async def create(self, user: User) -> SessionData:
        """
        Start an authenticated session for a user.

        A new id is issued on every login, and the expiry is fixed here.

        Args:
            user: The user who just signed up or logged in

        Returns:
            The stored session
        """
        now = datetime.now(timezone.utc)
        session = SessionData(
            id=secrets.token_urlsafe(32),
            authenticated=True,
            username=user.username,
            user_type=user.user_type,
            created_at=now,
            expires_at=now + timedelta(minutes=self.settings.session_expire_minutes),
        )

        payload = session.model_dump(mode="json", include=PAYLOAD_FIELDS)
        await self.sessions_collection.insert_one({
            "_id": session.id,
            "session": encrypt_session_payload(payload),
            "expires": session.expires_at,
        })

        return session

    async def load(self, cookie_value: Optional[str]) -> SessionData:
        """
        Resolve a session cookie into session data.

        Missing, forged, unknown, undecryptable and expired sessions all
        come back anonymous. Expired documents are removed.

        Args:
            cookie_value: Raw value of the session cookie

        Returns:
            SessionData for this request
        """
        if not cookie_value:
            return anonymous_session()

        session_id = unsign_session_id(cookie_value)
        if session_id is None:
            logger.debug("Ignoring session cookie with a bad signature")
            return anonymous_session()

        doc = await self.sessions_collection.find_one({"_id": session_id})
        if not doc:
            return anonymous_session()

        expires_at = _as_utc(doc.get("expires"))
        if expires_at is None or expires_at <= datetime.now(timezone.utc):
            await self.destroy(session_id)
            return anonymous_session()

        payload = decrypt_session_payload(doc.get("session", ""))
        if payload is None:
            logger.warning("Could not decrypt session %s", session_id[:8])
            return anonymous_session()

        fields = {
            key: payload[key]
            for key in PAYLOAD_FIELDS
            if payload.get(key) is not None
        }
        try:
            return SessionData(id=session_id, expires_at=expires_at, **fields)
        except ValidationError:
            logger.warning("Discarding malformed session %s", session_id[:8])
            return anonymous_session()

    async def destroy(self, session_id: Optional[str]) -> None:
        """Delete a stored session. Unknown ids are ignored."""
        if not session_id:
            return
        await self.sessions_collection.delete_one({"_id": session_id})
