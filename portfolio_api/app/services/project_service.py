"""
Service layer for portfolio projects.

Projects are listed newest first.  ``created_at`` is stamped here at
insert time and is never taken from, or changed by, client input.
The featured list drives the landing page and requires both the
``featured`` flag and ``published`` status.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..core.db import MemoryDatabase, Row
from ..schemas.project import ProjectCreate, ProjectRead, ProjectUpdate


def _newest_first(row: Row):
    return (row["created_at"], row["id"])


class ProjectService:
    """Service class for managing projects."""

    def __init__(self, db: MemoryDatabase) -> None:
        self._table = db.projects

    async def list_projects(self) -> List[ProjectRead]:
        rows = self._table.all(key=_newest_first, reverse=True)
        return [ProjectRead(**row) for row in rows]

    async def list_featured_projects(self) -> List[ProjectRead]:
        """Return published projects flagged as featured, newest first."""
        rows = [
            row
            for row in self._table.all(key=_newest_first, reverse=True)
            if row["featured"] and row["status"] == "published"
        ]
        return [ProjectRead(**row) for row in rows]

    async def get_project(self, project_id: int) -> Optional[ProjectRead]:
        row = self._table.get(project_id)
        return ProjectRead(**row) if row else None

    async def create_project(self, data: ProjectCreate) -> ProjectRead:
        logger = logging.getLogger(__name__)
        values = data.model_dump()
        values["created_at"] = datetime.now(timezone.utc)
        row = self._table.insert(values)
        logger.info("Created project %s", row["id"])
        return ProjectRead(**row)

    async def update_project(self, project_id: int, data: ProjectUpdate) -> Optional[ProjectRead]:
        """Update an existing project.

        Only fields provided in ``data`` are changed.  Returns the
        updated project or ``None`` if the record does not exist.
        """
        logger = logging.getLogger(__name__)
        changes = data.changes()
        changes.pop("created_at", None)
        row = self._table.update(project_id, changes)
        if row is None:
            return None
        logger.info("Updated project %s", project_id)
        return ProjectRead(**row)

    async def delete_project(self, project_id: int) -> bool:
        """Delete a project by ID.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        deleted = self._table.delete(project_id)
        if deleted:
            logging.getLogger(__name__).info("Deleted project %s", project_id)
        return deleted
