"""
Demo authentication.

A plaintext username/password lookup and a persona switch that maps a
role straight to a seeded user. There is no session or token; the client
keeps the returned user.
"""

import logging

from neudebri.core.exceptions import InvalidCredentialsError, NotFoundError
from neudebri.schemas import User, UserCreate
from neudebri.services.seed import DEMO_USERS
from neudebri.services.storage_service import StorageService

logger = logging.getLogger(__name__)


class AuthService:
    """Login, registration and demo persona lookup."""

    def __init__(self, storage: StorageService):
        self.storage = storage

    def login(self, username: str, password: str) -> User:
        """
        Check credentials.

        Raises:
            InvalidCredentialsError: Unknown user, wrong password or a
                soft-disabled account
        """
        user = self.storage.get_user_by_username(username)
        if user is None or user.password != password or not user.is_active:
            logger.info(f"Failed login for '{username}'")
            raise InvalidCredentialsError()
        return user

    def demo_user(self, role: str) -> User:
        """Seeded persona for ``role``; unknown roles get the patient persona."""
        user_id = DEMO_USERS.get(role, DEMO_USERS["patient"])
        user = self.storage.get_user(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def register(self, data: UserCreate) -> User:
        return self.storage.create_user(data)
