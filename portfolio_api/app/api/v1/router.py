"""
Top‑level router for version 1 of the API.

This router aggregates the per‑domain routers under their prefixes.
When a new record kind is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import (
    auth,
    profile,
    projects,
    skills,
    experiences,
    messages,
    stats,
)

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(profile.router, prefix="/profile", tags=["profile"])
router.include_router(projects.router, prefix="/projects", tags=["projects"])
router.include_router(skills.router, prefix="/skills", tags=["skills"])
router.include_router(experiences.router, prefix="/experiences", tags=["experiences"])
router.include_router(messages.router, prefix="/messages", tags=["messages"])
router.include_router(stats.router, prefix="/stats", tags=["stats"])
