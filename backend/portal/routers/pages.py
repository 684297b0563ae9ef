"""
Public and members-only pages.
"""
import random

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from portal.dependencies.auth import AuthenticatedSession
from portal.dependencies.session import CurrentSession
from portal.views import pages

router = APIRouter(tags=["Pages"])


@router.api_route(
    "/",
    methods=["GET", "HEAD"],
    response_class=HTMLResponse,
    summary="Home page",
)
async def home(session: CurrentSession):
    """Home page, showing whether the visitor is logged in."""
    return pages.render_home(session)


@router.api_route(
    "/members",
    methods=["GET", "HEAD"],
    response_class=HTMLResponse,
    summary="Members page",
)
async def members(session: AuthenticatedSession):
    """Personal greeting with a randomly picked image."""
    image = random.choice(pages.MEMBER_IMAGES)
    return pages.render_members(session.username or "", image)
