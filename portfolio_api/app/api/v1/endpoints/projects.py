"""
Project endpoints for API v1.

Listing and retrieving projects is public; the landing page uses the
``/featured`` list.  Creating, updating and deleting projects
requires an admin session.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from portfolio_api.app.api.deps import get_storage
from portfolio_api.app.core.security import get_current_user
from portfolio_api.app.schemas.common import MessageResponse
from portfolio_api.app.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from portfolio_api.app.services.storage import Storage

router = APIRouter()


@router.get("", response_model=List[ProjectRead])
async def list_projects(storage: Storage = Depends(get_storage)) -> List[ProjectRead]:
    """Return all projects, newest first."""
    return await storage.projects.list_projects()


@router.get("/featured", response_model=List[ProjectRead])
async def list_featured_projects(storage: Storage = Depends(get_storage)) -> List[ProjectRead]:
    """Return featured, published projects, newest first."""
    return await storage.projects.list_featured_projects()


@router.get("/{project_id}", response_model=ProjectRead)
async def get_project(project_id: int, storage: Storage = Depends(get_storage)) -> ProjectRead:
    """Retrieve a single project by ID.

    Returns HTTP 404 if the project is not found.
    """
    project = await storage.projects.get_project(project_id)
    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return project


@router.post("", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
async def create_project(
    project_in: ProjectCreate,
    storage: Storage = Depends(get_storage),
    current_user: dict = Depends(get_current_user),
) -> ProjectRead:
    """Create a new project (admin only)."""
    return await storage.projects.create_project(project_in)


@router.put("/{project_id}", response_model=ProjectRead)
async def update_project(
    project_id: int,
    project_in: ProjectUpdate,
    storage: Storage = Depends(get_storage),
    current_user: dict = Depends(get_current_user),
) -> ProjectRead:
    """Update an existing project (admin only)."""
    project = await storage.projects.update_project(project_id, project_in)
    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return project


@router.delete("/{project_id}", response_model=MessageResponse)
async def delete_project(
    project_id: int,
    storage: Storage = Depends(get_storage),
    current_user: dict = Depends(get_current_user),
) -> MessageResponse:
    """Delete a project (admin only)."""
    deleted = await storage.projects.delete_project(project_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return MessageResponse(message="Project deleted")
