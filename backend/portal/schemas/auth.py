"""
Authentication form schemas.
"""
from pydantic import BaseModel, EmailStr, Field, ValidationError


class SignupForm(BaseModel):
    """Signup form body."""
    username: str = Field(
        ...,
        min_length=1,
        max_length=20,
        pattern=r"^[A-Za-z0-9]+$",
        description="1-20 letters or digits",
    )
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


class LoginForm(BaseModel):
    """Login form body."""
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, max_length=20, description="User password")


# Shown for the first invalid signup field
SIGNUP_FIELD_ERRORS = {
    "username": "Username must be 1 to 20 letters or digits.",
    "email": "Email must be a valid email address.",
    "password": "Password is required.",
}

INVALID_LOGIN_MESSAGE = "Invalid email/password combination."


def first_invalid_field(error: ValidationError) -> str:
    """Name of the first field reported by a validation error."""
    errors = error.errors()
    if not errors or not errors[0].get("loc"):
        return ""
    return str(errors[0]["loc"][0])


def signup_error_message(error: ValidationError) -> str:
    """Field-specific message for a failed signup form."""
    field = first_invalid_field(error)
    return SIGNUP_FIELD_ERRORS.get(field, f"{field.capitalize()} is invalid.")
