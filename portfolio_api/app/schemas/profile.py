"""
Pydantic schemas for the portfolio owner's profile.

There is exactly one profile.  It carries the hero text, the two
"about" paragraphs, a few headline facts (location, experience,
education, availability) and contact details.  Social links, the
résumé URL and the profile image are optional.
"""

from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel

from .common import UpdateSchema


class ProfileBase(BaseModel):
    name: str
    title: str
    bio: str
    about_text: str
    about_text_2: str
    location: str
    experience: str
    education: str
    status: str
    email: str
    phone: str
    github: Optional[str] = None
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    resume_url: Optional[str] = None
    profile_image: Optional[str] = None


class ProfileCreate(ProfileBase):
    """Schema for creating the profile record."""


class ProfileUpdate(UpdateSchema):
    """Schema for updating the profile.

    All fields are optional; only provided values will be updated.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"github", "linkedin", "twitter", "resume_url", "profile_image"})

    name: Optional[str] = None
    title: Optional[str] = None
    bio: Optional[str] = None
    about_text: Optional[str] = None
    about_text_2: Optional[str] = None
    location: Optional[str] = None
    experience: Optional[str] = None
    education: Optional[str] = None
    status: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    github: Optional[str] = None
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    resume_url: Optional[str] = None
    profile_image: Optional[str] = None


class ProfileRead(ProfileBase):
    id: int
