"""
User response schemas.
"""
from pydantic import BaseModel, Field

from portal.models.user import UserType


class UserSummary(BaseModel):
    """User row shown on the admin page (excludes the password hash)."""
    username: str = Field(..., description="Username")
    email: str = Field(..., description="User email")
    user_type: UserType = Field(..., description="Role of the user")

    class Config:
        use_enum_values = True
