"""
Skill endpoints for API v1.

``GET /skills`` accepts an optional ``category`` query parameter.
The filter is an exact match, so an unknown category returns an
empty list rather than an error.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from portfolio_api.app.api.deps import get_storage
from portfolio_api.app.core.security import get_current_user
from portfolio_api.app.schemas.common import MessageResponse
from portfolio_api.app.schemas.skill import SkillCreate, SkillRead, SkillUpdate
from portfolio_api.app.services.storage import Storage

router = APIRouter()


@router.get("", response_model=List[SkillRead])
async def list_skills(
    category: Optional[str] = Query(None, description="Only return skills in this category"),
    storage: Storage = Depends(get_storage),
) -> List[SkillRead]:
    if category:
        return await storage.skills.list_skills_by_category(category)
    return await storage.skills.list_skills()


@router.get("/{skill_id}", response_model=SkillRead)
async def get_skill(skill_id: int, storage: Storage = Depends(get_storage)) -> SkillRead:
    skill = await storage.skills.get_skill(skill_id)
    if skill is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Skill not found")
    return skill


@router.post("", response_model=SkillRead, status_code=status.HTTP_201_CREATED)
async def create_skill(
    skill_in: SkillCreate,
    storage: Storage = Depends(get_storage),
    current_user: dict = Depends(get_current_user),
) -> SkillRead:
    return await storage.skills.create_skill(skill_in)


@router.put("/{skill_id}", response_model=SkillRead)
async def update_skill(
    skill_id: int,
    skill_in: SkillUpdate,
    storage: Storage = Depends(get_storage),
    current_user: dict = Depends(get_current_user),
) -> SkillRead:
    skill = await storage.skills.update_skill(skill_id, skill_in)
    if skill is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Skill not found")
    return skill


@router.delete("/{skill_id}", response_model=MessageResponse)
async def delete_skill(
    skill_id: int,
    storage: Storage = Depends(get_storage),
    current_user: dict = Depends(get_current_user),
) -> MessageResponse:
    deleted = await storage.skills.delete_skill(skill_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Skill not found")
    return MessageResponse(message="Skill deleted")
