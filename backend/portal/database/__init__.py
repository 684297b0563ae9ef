"""
Database module - MongoDB connection and database definitions.
"""
from portal.database.connections import (
    get_mongo_client,
    close_connections,
    get_database,
)
from portal.database.databases import portal_db
from portal.database.indexes import create_indexes, has_session_ttl_index

__all__ = [
    "get_mongo_client",
    "close_connections",
    "get_database",
    "portal_db",
    "create_indexes",
    "has_session_ttl_index",
]
