"""
Service layer for the portfolio profile.

The profile is a singleton: ``init_db`` seeds one record and
``get_profile`` always returns the first (oldest) one.  Updates are
addressed by id like every other record kind so the admin UI can use
the same request shape.
"""

import logging
from typing import Optional

from ..core.db import MemoryDatabase
from ..schemas.profile import ProfileCreate, ProfileRead, ProfileUpdate


class ProfileService:
    """Service class for the profile record."""

    def __init__(self, db: MemoryDatabase) -> None:
        self._table = db.profiles

    async def get_profile(self) -> Optional[ProfileRead]:
        row = self._table.first()
        return ProfileRead(**row) if row else None

    async def create_profile(self, data: ProfileCreate) -> ProfileRead:
        logger = logging.getLogger(__name__)
        row = self._table.insert(data.model_dump())
        logger.info("Created profile %s", row["id"])
        return ProfileRead(**row)

    async def update_profile(self, profile_id: int, data: ProfileUpdate) -> Optional[ProfileRead]:
        """Merge the supplied fields onto the profile.

        Returns the updated profile or ``None`` if ``profile_id`` does
        not exist.
        """
        logger = logging.getLogger(__name__)
        row = self._table.update(profile_id, data.changes())
        if row is None:
            return None
        logger.info("Updated profile %s", profile_id)
        return ProfileRead(**row)
