"""
Routers module.
"""
from portal.routers import admin, auth, health, pages

__all__ = ["admin", "auth", "health", "pages"]
