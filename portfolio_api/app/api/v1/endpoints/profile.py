"""
Profile endpoints for API v1.

The profile is public; only the admin may change it.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from portfolio_api.app.api.deps import get_storage
from portfolio_api.app.core.security import get_current_user
from portfolio_api.app.schemas.profile import ProfileRead, ProfileUpdate
from portfolio_api.app.services.storage import Storage

router = APIRouter()


@router.get("", response_model=Optional[ProfileRead])
async def get_profile(storage: Storage = Depends(get_storage)) -> Optional[ProfileRead]:
    """Return the profile, or ``null`` if none exists."""
    return await storage.profiles.get_profile()


@router.put("/{profile_id}", response_model=ProfileRead)
async def update_profile(
    profile_id: int,
    profile_in: ProfileUpdate,
    storage: Storage = Depends(get_storage),
    current_user: dict = Depends(get_current_user),
) -> ProfileRead:
    """Update the profile (admin only).  Omitted fields are left unchanged."""
    profile = await storage.profiles.update_profile(profile_id, profile_in)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return profile
