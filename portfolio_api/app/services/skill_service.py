"""
Service layer for skills.

Category is matched by plain string equality; an unknown category is
not an error, it simply has no skills.
"""

import logging
from typing import List, Optional

from ..core.db import MemoryDatabase
from ..schemas.skill import SkillCreate, SkillRead, SkillUpdate


class SkillService:
    """Service class for managing skills."""

    def __init__(self, db: MemoryDatabase) -> None:
        self._table = db.skills

    async def list_skills(self) -> List[SkillRead]:
        return [SkillRead(**row) for row in self._table.all()]

    async def list_skills_by_category(self, category: str) -> List[SkillRead]:
        return [SkillRead(**row) for row in self._table.find(lambda r: r["category"] == category)]

    async def get_skill(self, skill_id: int) -> Optional[SkillRead]:
        row = self._table.get(skill_id)
        return SkillRead(**row) if row else None

    async def create_skill(self, data: SkillCreate) -> SkillRead:
        logger = logging.getLogger(__name__)
        row = self._table.insert(data.model_dump())
        logger.info("Created skill %s", row["id"])
        return SkillRead(**row)

    async def update_skill(self, skill_id: int, data: SkillUpdate) -> Optional[SkillRead]:
        logger = logging.getLogger(__name__)
        row = self._table.update(skill_id, data.changes())
        if row is None:
            return None
        logger.info("Updated skill %s", skill_id)
        return SkillRead(**row)

    async def delete_skill(self, skill_id: int) -> bool:
        deleted = self._table.delete(skill_id)
        if deleted:
            logging.getLogger(__name__).info("Deleted skill %s", skill_id)
        return deleted
