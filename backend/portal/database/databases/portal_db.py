"""
Portal database configuration.
Stores user credentials and server-side sessions.
"""


class Collections:
    """Collection names in the portal database."""
    USERS = "users"
    SESSIONS = "sessions"
