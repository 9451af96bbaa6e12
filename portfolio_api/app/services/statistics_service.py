"""
Service layer for the admin dashboard statistics.

Provides the totals shown on the dashboard overview: number of
projects, skills, experience entries and messages, plus how many
messages are still unread.
"""

from ..core.db import MemoryDatabase
from ..schemas.stats import DashboardStats
from .message_service import MessageService


class StatisticsService:
    """Service providing aggregated counts for administrators."""

    def __init__(self, db: MemoryDatabase) -> None:
        self._db = db
        self._messages = MessageService(db)

    async def overview(self) -> DashboardStats:
        return DashboardStats(
            total_projects=len(self._db.projects),
            total_skills=len(self._db.skills),
            total_experiences=len(self._db.experiences),
            total_messages=len(self._db.messages),
            unread_messages=await self._messages.count_unread_messages(),
        )
