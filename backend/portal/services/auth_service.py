"""
Authentication service for user management and login.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from portal.core.security import dummy_password_hash, hash_password, verify_password
from portal.database.databases import portal_db
from portal.models.user import User, UserType
from portal.schemas.auth import LoginForm, SignupForm
from portal.schemas.user import UserSummary

logger = logging.getLogger(__name__)


class AuthService:
    """Service for credential store operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the portal database."""
        self.db = db
        self.users_collection = db[portal_db.Collections.USERS]

    async def register_user(self, form: SignupForm) -> User:
        """
        Register a new user with the default role.

        Username and email are not checked for duplicates.

        Args:
            form: Validated signup form

        Returns:
            The stored user
        """
        user_doc = {
            "username": form.username,
            "email": form.email,
            "password": hash_password(form.password),
            "user_type": UserType.USER.value,
        }

        result = await self.users_collection.insert_one(user_doc)
        logger.info("New user has been created: %s", form.username)

        user_doc["_id"] = str(result.inserted_id)
        return User(**user_doc)

    async def authenticate(self, form: LoginForm) -> Optional[User]:
        """
        Check an email/password pair.

        Args:
            form: Validated login form

        Returns:
            The matching user, or None when the email is unknown or the
            password is wrong
        """
        user = await self.get_user_by_email(form.email)
        hashed_password = user.password if user is not None else dummy_password_hash()

        if not verify_password(form.password, hashed_password) or user is None:
            logger.info("Failed login attempt for %s", form.email)
            return None

        return user

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email.

        Args:
            email: User email address

        Returns:
            User model or None if not found
        """
        user_doc = await self.users_collection.find_one({"email": email})

        if not user_doc:
            return None

        user_doc["_id"] = str(user_doc["_id"])
        return User(**user_doc)

    async def list_users(self) -> list[UserSummary]:
        """Every user, in insertion order."""
        cursor = self.users_collection.find(
            {},
            {"_id": 0, "username": 1, "email": 1, "user_type": 1},
        )
        docs = await cursor.to_list(length=None)

        return [
            UserSummary(
                username=doc.get("username", ""),
                email=doc.get("email", ""),
                user_type=doc.get("user_type", UserType.USER.value),
            )
            for doc in docs
        ]

    async def set_user_type(self, username: str, user_type: UserType) -> int:
        """
        Set the role of the first user with the given username.

        Args:
            username: Target username
            user_type: New role

        Returns:
            1 if a user matched, 0 otherwise
        """
        result = await self.users_collection.update_one(
            {"username": username},
            {"$set": {"user_type": user_type.value}},
        )
        logger.info(
            "Set user_type=%s for %s (%d matched)",
            user_type.value,
            username,
            result.matched_count,
        )
        return result.matched_count
