"""
User model for the portal database.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class UserType(str, Enum):
    """User role levels."""
    USER = "user"
    ADMIN = "admin"


class User(BaseModel):
    """
    User document model for the MongoDB users collection.

    Username and email are unique by convention only.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    username: str = Field(..., description="Display name, 1-20 letters or digits")
    email: str = Field(..., description="Login email address")
    password: str = Field(..., description="Bcrypt hashed password")
    user_type: UserType = Field(
        default=UserType.USER,
        description="Role of the user"
    )

    class Config:
        populate_by_name = True
        use_enum_values = True
