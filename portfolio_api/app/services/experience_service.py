"""
Service layer for work experience entries.

Entries are listed by their ``order`` value, highest first.  Entries
sharing an order keep the order in which they were created.
"""

import logging
from typing import List, Optional

from ..core.db import MemoryDatabase
from ..schemas.experience import ExperienceCreate, ExperienceRead, ExperienceUpdate


class ExperienceService:
    """Service class for managing experience entries."""

    def __init__(self, db: MemoryDatabase) -> None:
        self._table = db.experiences

    async def list_experiences(self) -> List[ExperienceRead]:
        rows = self._table.all(key=lambda r: r["order"], reverse=True)
        return [ExperienceRead(**row) for row in rows]

    async def get_experience(self, experience_id: int) -> Optional[ExperienceRead]:
        row = self._table.get(experience_id)
        return ExperienceRead(**row) if row else None

    async def create_experience(self, data: ExperienceCreate) -> ExperienceRead:
        logger = logging.getLogger(__name__)
        row = self._table.insert(data.model_dump())
        logger.info("Created experience %s", row["id"])
        return ExperienceRead(**row)

    async def update_experience(
        self, experience_id: int, data: ExperienceUpdate
    ) -> Optional[ExperienceRead]:
        logger = logging.getLogger(__name__)
        row = self._table.update(experience_id, data.changes())
        if row is None:
            return None
        logger.info("Updated experience %s", experience_id)
        return ExperienceRead(**row)

    async def delete_experience(self, experience_id: int) -> bool:
        deleted = self._table.delete(experience_id)
        if deleted:
            logging.getLogger(__name__).info("Deleted experience %s", experience_id)
        return deleted
