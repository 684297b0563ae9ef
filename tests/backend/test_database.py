"""
Tests for database connections and startup.

These tests cover:
- MongoDB connection initialization
- Index creation
- Startup failing when MongoDB is unreachable
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch


class TestMongoDBConnection:
    """Tests for MongoDB connection handling."""

    @pytest.mark.asyncio
    async def test_get_mongo_client_creates_connection(self):
        """get_mongo_client should create connection on first call."""
        import portal.database.connections as conn_module

        with patch("portal.database.connections.AsyncIOMotorClient") as mock_client, \
             patch("portal.database.connections.get_settings") as mock_settings:

            mock_settings.return_value.mongodb_uri = "mongodb://test:27017/members_portal"
            mock_instance = MagicMock()
            mock_client.return_value = mock_instance

            # Reset global state for this test
            conn_module._mongo_client = None

            client = await conn_module.get_mongo_client()
            again = await conn_module.get_mongo_client()

            mock_client.assert_called_once_with("mongodb://test:27017/members_portal")
            assert client is mock_instance
            assert again is mock_instance

            conn_module._mongo_client = None

    @pytest.mark.asyncio
    async def test_close_connections_cleans_up(self):
        """close_connections should close and forget the client."""
        import portal.database.connections as conn_module

        mock_mongo = MagicMock()
        conn_module._mongo_client = mock_mongo

        await conn_module.close_connections()

        mock_mongo.close.assert_called_once()
        assert conn_module._mongo_client is None


class TestIndexes:
    """Tests for index creation."""

    @pytest.mark.asyncio
    async def test_create_indexes_adds_session_ttl(self, mock_portal_db):
        from portal.database.indexes import create_indexes, has_session_ttl_index

        await create_indexes(mock_portal_db)

        session_indexes = await mock_portal_db.sessions.index_information()
        assert has_session_ttl_index(session_indexes)

    def test_plain_expires_index_is_not_a_ttl_index(self):
        from portal.database.indexes import has_session_ttl_index

        assert not has_session_ttl_index({"expires_1": {"key": [("expires", 1)]}})
        assert not has_session_ttl_index({})

    @pytest.mark.asyncio
    async def test_user_indexes_are_not_unique(self, mock_portal_db):
        """Duplicate usernames and emails are allowed."""
        from portal.database.indexes import create_indexes

        await create_indexes(mock_portal_db)

        user_indexes = await mock_portal_db.users.index_information()
        assert not any(info.get("unique") for info in user_indexes.values())


class TestLifespan:
    """Tests for application startup."""

    @pytest.mark.asyncio
    async def test_startup_fails_when_mongodb_unreachable(self):
        from portal.main import app, lifespan

        mock_client = MagicMock()
        mock_client.admin.command = AsyncMock(side_effect=Exception("Connection refused"))

        with patch("portal.main.get_mongo_client", AsyncMock(return_value=mock_client)), \
             patch("portal.main.close_connections", AsyncMock()) as mock_close:
            with pytest.raises(Exception, match="Connection refused"):
                async with lifespan(app):
                    pass

            mock_close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_startup_creates_indexes_and_shutdown_closes(self):
        from portal.main import app, lifespan

        mock_client = MagicMock()
        mock_client.admin.command = AsyncMock(return_value={"ok": 1})

        with patch("portal.main.get_mongo_client", AsyncMock(return_value=mock_client)), \
             patch("portal.main.create_indexes", AsyncMock()) as mock_indexes, \
             patch("portal.main.close_connections", AsyncMock()) as mock_close:
            async with lifespan(app):
                mock_indexes.assert_awaited_once()
                mock_close.assert_not_awaited()

            mock_close.assert_awaited_once()
