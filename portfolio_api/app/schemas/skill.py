"""
Pydantic schemas for skills.

Skills are grouped by ``category`` on the public site and rendered as
progress bars using ``percentage``.  Category and level are closed
sets here, at the API boundary; storage itself keeps them as plain
strings.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from .common import UpdateSchema


SkillCategory = Literal["frontend", "backend", "cloud", "tools"]
SkillLevel = Literal["beginner", "intermediate", "advanced", "expert"]


class SkillCreate(BaseModel):
    name: str = Field(..., min_length=1, examples=["Python"])
    category: SkillCategory = Field(..., examples=["backend"])
    level: SkillLevel = Field(..., examples=["advanced"])
    percentage: int = Field(..., ge=0, le=100, examples=[85])


class SkillUpdate(UpdateSchema):
    name: Optional[str] = Field(None, min_length=1)
    category: Optional[SkillCategory] = None
    level: Optional[SkillLevel] = None
    percentage: Optional[int] = Field(None, ge=0, le=100)


class SkillRead(BaseModel):
    id: int
    name: str
    category: str
    level: str
    percentage: int
