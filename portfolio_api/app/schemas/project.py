"""
Pydantic schemas for portfolio projects.

A project has a title, a description, an ordered list of technology
tags and optional links (live site, source repository, image).  Only
projects whose ``status`` is ``published`` and which are flagged
``featured`` appear on the landing page.  ``created_at`` is set by
storage and cannot be supplied by clients.
"""

from datetime import datetime
from typing import ClassVar, FrozenSet, List, Literal, Optional

from pydantic import BaseModel, Field

from .common import UpdateSchema


ProjectStatus = Literal["draft", "published"]


class ProjectCreate(BaseModel):
    """Schema for creating a new project."""

    title: str = Field(..., min_length=1, description="Project title")
    description: str = Field(..., description="Short description shown on the project card")
    technologies: List[str] = Field(..., description="Technology tags in display order")
    live_url: Optional[str] = Field(None, description="URL of the deployed project")
    github_url: Optional[str] = Field(None, description="URL of the source repository")
    image: Optional[str] = Field(None, description="Preview image URL")
    status: ProjectStatus = Field("draft", description="draft or published")
    featured: bool = Field(False, description="Show on the landing page when published")


class ProjectUpdate(UpdateSchema):
    """Schema for updating an existing project.

    All fields are optional; only provided values will be updated.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"live_url", "github_url", "image"})

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    technologies: Optional[List[str]] = None
    live_url: Optional[str] = None
    github_url: Optional[str] = None
    image: Optional[str] = None
    status: Optional[ProjectStatus] = None
    featured: Optional[bool] = None


class ProjectRead(BaseModel):
    """Schema for reading a project."""

    id: int
    title: str
    description: str
    technologies: List[str]
    live_url: Optional[str] = None
    github_url: Optional[str] = None
    image: Optional[str] = None
    status: str
    featured: bool
    created_at: datetime
