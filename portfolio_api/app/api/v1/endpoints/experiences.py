"""
Experience endpoints for API v1.

Entries are returned by ``order`` descending.  Only the admin may
create, update or delete entries.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from portfolio_api.app.api.deps import get_storage
from portfolio_api.app.core.security import get_current_user
from portfolio_api.app.schemas.common import MessageResponse
from portfolio_api.app.schemas.experience import ExperienceCreate, ExperienceRead, ExperienceUpdate
from portfolio_api.app.services.storage import Storage

router = APIRouter()


@router.get("", response_model=List[ExperienceRead])
async def list_experiences(storage: Storage = Depends(get_storage)) -> List[ExperienceRead]:
    return await storage.experiences.list_experiences()


@router.get("/{experience_id}", response_model=ExperienceRead)
async def get_experience(experience_id: int, storage: Storage = Depends(get_storage)) -> ExperienceRead:
    experience = await storage.experiences.get_experience(experience_id)
    if experience is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Experience not found")
    return experience


@router.post("", response_model=ExperienceRead, status_code=status.HTTP_201_CREATED)
async def create_experience(
    experience_in: ExperienceCreate,
    storage: Storage = Depends(get_storage),
    current_user: dict = Depends(get_current_user),
) -> ExperienceRead:
    return await storage.experiences.create_experience(experience_in)


@router.put("/{experience_id}", response_model=ExperienceRead)
async def update_experience(
    experience_id: int,
    experience_in: ExperienceUpdate,
    storage: Storage = Depends(get_storage),
    current_user: dict = Depends(get_current_user),
) -> ExperienceRead:
    experience = await storage.experiences.update_experience(experience_id, experience_in)
    if experience is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Experience not found")
    return experience


@router.delete("/{experience_id}", response_model=MessageResponse)
async def delete_experience(
    experience_id: int,
    storage: Storage = Depends(get_storage),
    current_user: dict = Depends(get_current_user),
) -> MessageResponse:
    deleted = await storage.experiences.delete_experience(experience_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Experience not found")
    return MessageResponse(message="Experience deleted")
