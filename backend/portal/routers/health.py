"""
Health check router for liveness and readiness probes.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorDatabase

from portal.database.connections import get_database
from portal.database.databases import portal_db
from portal.database.indexes import has_session_ttl_index

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if the server is running.
    """
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    summary="Readiness check for login and sessions",
)
async def readiness_check(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)],
):
    """
    Readiness check for the pieces logins depend on.

    - **mongodb**: the portal database answers a ping
    - **session_expiry**: the sessions collection carries the TTL index
      that removes expired sessions

    Returns 503 while either check fails.
    """
    checks = {
        "mongodb": "unknown",
        "session_expiry": "unknown",
    }

    try:
        await db.command("ping")
        checks["mongodb"] = "healthy"
    except Exception as e:
        checks["mongodb"] = f"unhealthy: {str(e)}"

    try:
        indexes = await db[portal_db.Collections.SESSIONS].index_information()
        if has_session_ttl_index(indexes):
            checks["session_expiry"] = "healthy"
        else:
            checks["session_expiry"] = "unhealthy: sessions TTL index missing"
    except Exception as e:
        checks["session_expiry"] = f"unhealthy: {str(e)}"

    all_healthy = all(v == "healthy" for v in checks.values())

    return JSONResponse(
        {
            "status": "healthy" if all_healthy else "degraded",
            "checks": checks,
        },
        status_code=status.HTTP_200_OK if all_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
    )
