"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from typing import Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # MongoDB
    mongodb_host: str = "localhost:27017"
    mongodb_user: str = ""
    mongodb_password: str = ""
    mongodb_database: str = "members_portal"
    mongodb_srv: bool = False
    mongo_uri: Optional[str] = None

    # Sessions
    session_secret: str = "CHANGE_ME_IN_PRODUCTION_USE_STRONG_SECRET"
    session_encryption_secret: str = "CHANGE_ME_IN_PRODUCTION_USE_ANOTHER_SECRET"
    session_cookie_name: str = "session_id"
    session_cookie_secure: bool = False
    session_expire_minutes: int = 60
    session_signing_algorithm: str = "HS256"

    # Passwords
    bcrypt_rounds: int = 12

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def mongodb_uri(self) -> str:
        """Connection string, built from the host parts unless overridden."""
        if self.mongo_uri:
            return self.mongo_uri

        scheme = "mongodb+srv" if self.mongodb_srv else "mongodb"
        credentials = ""
        if self.mongodb_user:
            credentials = (
                f"{quote_plus(self.mongodb_user)}:{quote_plus(self.mongodb_password)}@"
            )
        uri = f"{scheme}://{credentials}{self.mongodb_host}/{self.mongodb_database}"
        if self.mongodb_srv:
            uri += "?retryWrites=true&w=majority"
        return uri


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
