"""
Index management.
Ensures the collections have their lookup and expiry indexes on startup.
"""
from motor.motor_asyncio import AsyncIOMotorDatabase

from portal.database.databases import portal_db

SESSION_EXPIRY_FIELD = "expires"


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create necessary indexes for the portal database."""

    # Users: lookup only, uniqueness is not enforced
    users = db[portal_db.Collections.USERS]
    await users.create_index("email")
    await users.create_index("username")

    # Sessions: MongoDB reaps documents once "expires" has passed
    sessions = db[portal_db.Collections.SESSIONS]
    await sessions.create_index(SESSION_EXPIRY_FIELD, expireAfterSeconds=0)


def has_session_ttl_index(index_information: dict) -> bool:
    """
    Whether the sessions collection's indexes include the expiry TTL index.

    Args:
        index_information: Result of ``index_information()`` on the collection
    """
    for info in index_information.values():
        fields = [field for field, _ in info.get("key", [])]
        if fields == [SESSION_EXPIRY_FIELD] and "expireAfterSeconds" in info:
            return True
    return False
