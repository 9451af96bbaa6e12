"""
The storage context object.

``Storage`` bundles one service per record kind around a single
``MemoryDatabase``.  ``create_storage`` builds and seeds a new one;
the application calls it once at startup and hands the result to the
API layer via ``app.state``, so every application (and every test)
gets its own isolated store.
"""

from ..core.config import Settings
from ..core.db import MemoryDatabase, init_db
from .experience_service import ExperienceService
from .message_service import MessageService
from .profile_service import ProfileService
from .project_service import ProjectService
from .skill_service import SkillService
from .statistics_service import StatisticsService
from .user_service import UserService


class Storage:
    """Sole owner of all portfolio state."""

    def __init__(self, db: MemoryDatabase) -> None:
        self.db = db
        self.users = UserService(db)
        self.profiles = ProfileService(db)
        self.projects = ProjectService(db)
        self.skills = SkillService(db)
        self.experiences = ExperienceService(db)
        self.messages = MessageService(db)
        self.statistics = StatisticsService(db)


def create_storage(settings: Settings) -> Storage:
    """Create a seeded storage instance for ``settings``."""
    db = MemoryDatabase(shared_sequence=settings.shared_id_sequence)
    init_db(db, settings)
    return Storage(db)
