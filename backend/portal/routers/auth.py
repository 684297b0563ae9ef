"""
Authentication router for signup, login, and logout.
"""
import logging
from typing import Annotated

from fastapi import APIRouter, Form, status
from fastapi.responses import HTMLResponse
from pydantic import ValidationError

from portal.core.errors import redirect
from portal.dependencies.session import (
    AuthServiceDep,
    CurrentSession,
    SessionServiceDep,
    clear_session_cookie,
    set_session_cookie,
)
from portal.schemas.auth import (
    INVALID_LOGIN_MESSAGE,
    LoginForm,
    SignupForm,
    signup_error_message,
)
from portal.views import pages

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])


@router.api_route(
    "/signup",
    methods=["GET", "HEAD"],
    response_class=HTMLResponse,
    summary="Signup form",
)
async def signup_form():
    return pages.render_signup()


@router.post("/signup", summary="Create an account")
async def signup(
    session: CurrentSession,
    auth_service: AuthServiceDep,
    session_service: SessionServiceDep,
    username: Annotated[str, Form()] = "",
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
):
    """
    Create a user account and log it in.

    - **username**: 1-20 letters or digits
    - **email**: Valid email address
    - **password**: Non-empty password

    Invalid input re-renders the form with a message about the first bad
    field, keeping the username and email that were typed in.
    """
    try:
        form = SignupForm(username=username, email=email, password=password)
    except ValidationError as e:
        logger.info("Rejected signup: %s", e.errors()[0].get("loc"))
        return HTMLResponse(
            pages.render_signup(
                error=signup_error_message(e),
                username=username,
                email=email,
            ),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    user = await auth_service.register_user(form)

    await session_service.destroy(session.id)
    new_session = await session_service.create(user)

    response = redirect("/members")
    set_session_cookie(response, new_session)
    return response


@router.api_route(
    "/login",
    methods=["GET", "HEAD"],
    response_class=HTMLResponse,
    summary="Login form",
)
async def login_form():
    return pages.render_login()


@router.post("/login", summary="Log in with email and password")
async def login(
    session: CurrentSession,
    auth_service: AuthServiceDep,
    session_service: SessionServiceDep,
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
):
    """
    Authenticate with email and password.

    Unknown emails and wrong passwords get the same answer, so the form
    cannot be used to find out which emails have accounts.
    """
    try:
        form = LoginForm(email=email, password=password)
    except ValidationError:
        return HTMLResponse(
            pages.render_login(error=INVALID_LOGIN_MESSAGE, email=email),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    user = await auth_service.authenticate(form)
    if user is None:
        return HTMLResponse(
            pages.render_login(error=INVALID_LOGIN_MESSAGE, email=email),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    await session_service.destroy(session.id)
    new_session = await session_service.create(user)

    response = redirect("/members")
    set_session_cookie(response, new_session)
    return response


@router.get("/logout", summary="Log out")
async def logout(session: CurrentSession, session_service: SessionServiceDep):
    """Destroy the session and send the browser home."""
    if session.authenticated:
        logger.info("User logged out: %s", session.username)

    await session_service.destroy(session.id)

    response = redirect("/")
    clear_session_cookie(response)
    return response
