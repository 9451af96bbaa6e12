"""
Pydantic schemas for work experience entries.

``period`` is free text (e.g. ``"2021 - Present"``).  Entries are
listed by ``order`` descending; the admin chooses the order, storage
never assigns it.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .common import UpdateSchema


class ExperienceCreate(BaseModel):
    title: str = Field(..., min_length=1, examples=["Senior Developer"])
    company: str = Field(..., min_length=1, examples=["Acme Corp"])
    period: str = Field(..., examples=["2021 - Present"])
    description: str
    technologies: List[str]
    current: bool = False
    order: int = Field(0, description="Display position; higher values are listed first")


class ExperienceUpdate(UpdateSchema):
    title: Optional[str] = Field(None, min_length=1)
    company: Optional[str] = Field(None, min_length=1)
    period: Optional[str] = None
    description: Optional[str] = None
    technologies: Optional[List[str]] = None
    current: Optional[bool] = None
    order: Optional[int] = None


class ExperienceRead(BaseModel):
    id: int
    title: str
    company: str
    period: str
    description: str
    technologies: List[str]
    current: bool
    order: int
