"""
Business logic for admin users.

Users are only created at startup (the seeded admin) or by tooling;
the API exposes no registration endpoint.  Passwords are stored as
PBKDF2 hashes produced by ``core.security.hash_password``.
"""

import logging
from typing import Optional

from ..core.db import MemoryDatabase
from ..core.security import hash_password, verify_password
from ..schemas.user import UserCreate, UserInDB


class UserService:
    """Service for looking up and authenticating users."""

    def __init__(self, db: MemoryDatabase) -> None:
        self._table = db.users

    async def get_user(self, user_id: int) -> Optional[UserInDB]:
        row = self._table.get(user_id)
        return UserInDB(**row) if row else None

    async def get_user_by_username(self, username: str) -> Optional[UserInDB]:
        row = next(self._table.find(lambda r: r["username"] == username), None)
        return UserInDB(**row) if row else None

    async def create_user(self, data: UserCreate) -> UserInDB:
        """Create a user with a hashed password.

        Raises ``ValueError`` if the username is already taken.
        """
        logger = logging.getLogger(__name__)
        if await self.get_user_by_username(data.username):
            raise ValueError(f"Username {data.username!r} already exists")
        row = self._table.insert(
            {"username": data.username, "password_hash": hash_password(data.password)}
        )
        logger.info("Created user %s", row["id"])
        return UserInDB(**row)

    async def authenticate(self, username: str, password: str) -> Optional[UserInDB]:
        """Return the user if ``password`` matches, otherwise ``None``."""
        user = await self.get_user_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            return None
        return user
