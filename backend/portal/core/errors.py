"""
Application exceptions and the handlers that turn them into pages.

Guards raise these instead of returning responses, so a route body only
runs once every dependency has passed.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from portal.views import pages

logger = logging.getLogger(__name__)


class LoginRequired(Exception):
    """Raised when a route needs an authenticated session."""

    def __init__(self, location: str = "/"):
        super().__init__(location)
        self.location = location


class NotAuthorized(Exception):
    """Raised when the session lacks the role a route needs."""


def redirect(location: str) -> RedirectResponse:
    """Redirect that always turns the follow-up request into a GET."""
    return RedirectResponse(location, status_code=status.HTTP_303_SEE_OTHER)


async def login_required_handler(request: Request, exc: LoginRequired):
    return redirect(exc.location)


async def not_authorized_handler(request: Request, exc: NotAuthorized):
    logger.info("Forbidden request to %s", request.url.path)
    return HTMLResponse(
        pages.render_not_authorized(),
        status_code=status.HTTP_403_FORBIDDEN,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return HTMLResponse(
            pages.render_not_found(),
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return HTMLResponse(
        pages.render_error(exc.status_code, str(exc.detail)),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("Bad request to %s: %s", request.url.path, exc.errors())
    return HTMLResponse(
        pages.render_error(status.HTTP_400_BAD_REQUEST, "Bad Request"),
        status_code=status.HTTP_400_BAD_REQUEST,
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return HTMLResponse(
        pages.render_error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"),
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every page-rendering exception handler to the app."""
    app.add_exception_handler(LoginRequired, login_required_handler)
    app.add_exception_handler(NotAuthorized, not_authorized_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
