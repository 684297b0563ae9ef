"""
Members Portal - FastAPI Application

A small members site with signup, login, server-side sessions, and an
admin role that can promote or demote users.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from portal.config import get_settings
from portal.core.errors import register_exception_handlers
from portal.core.logging_config import setup_logging
from portal.database.connections import close_connections, get_mongo_client
from portal.database.indexes import create_indexes
from portal.routers import admin, auth, health, pages

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Connect to MongoDB and ping it; failure stops the server
    - Create indexes

    Shutdown:
    - Close the database connection
    """
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Starting up Members Portal...")

    try:
        client = await get_mongo_client()
        await client.admin.command("ping")
        await create_indexes(client[settings.mongodb_database])
    except Exception:
        logger.exception("MongoDB connection error")
        await close_connections()
        raise
    logger.info('MongoDB connected to "%s"', settings.mongodb_database)

    yield

    logger.info("Shutting down Members Portal...")
    await close_connections()


# Create FastAPI application
app = FastAPI(
    title="Members Portal",
    description="""
## Members Portal

Signup, login and a members-only page, with an admin area for managing
user roles.

### Sessions
Logging in stores a session in MongoDB and sets a signed `session_id`
cookie. Sessions expire a fixed time after login.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

# Include routers
app.include_router(health.router)
app.include_router(pages.router)
app.include_router(auth.router)
app.include_router(admin.router)
