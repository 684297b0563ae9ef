"""
Admin router for listing users and changing their role.
"""
import logging
from typing import Annotated

from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse

from portal.core.errors import redirect
from portal.dependencies.roles import AdminSession
from portal.dependencies.session import AuthServiceDep
from portal.models.user import UserType
from portal.views import pages

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.api_route(
    "",
    methods=["GET", "HEAD"],
    response_class=HTMLResponse,
    summary="List all users",
)
async def list_users(session: AdminSession, auth_service: AuthServiceDep):
    users = await auth_service.list_users()
    return pages.render_admin(users)


@router.get("/promote", summary="Make a user an admin")
async def promote_user(
    session: AdminSession,
    auth_service: AuthServiceDep,
    user: Annotated[str, Query(min_length=1, description="Username to promote")],
):
    """
    Set the user's role to admin.

    The change applies to the user's next login.
    """
    await auth_service.set_user_type(user, UserType.ADMIN)
    logger.info("%s promoted %s", session.username, user)
    return redirect("/admin")


@router.get("/demote", summary="Make an admin a regular user")
async def demote_user(
    session: AdminSession,
    auth_service: AuthServiceDep,
    user: Annotated[str, Query(min_length=1, description="Username to demote")],
):
    """
    Set the user's role back to user.

    Admins can demote themselves, including the last admin.
    """
    await auth_service.set_user_type(user, UserType.USER)
    logger.info("%s demoted %s", session.username, user)
    return redirect("/admin")
