"""
Request and response schemas for the site's forms and pages.
"""
from portal.schemas.auth import (
    INVALID_LOGIN_MESSAGE,
    LoginForm,
    SignupForm,
    signup_error_message,
)
from portal.schemas.user import UserSummary

__all__ = [
    # Auth
    "INVALID_LOGIN_MESSAGE",
    "LoginForm",
    "SignupForm",
    "signup_error_message",
    # User
    "UserSummary",
]
