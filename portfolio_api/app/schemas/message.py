"""
Pydantic schemas for contact form messages.

Visitors submit ``name``, ``email``, ``subject`` and ``message``.
Storage adds ``read`` (always ``False`` on creation) and
``created_at``; neither can be supplied by the client.
"""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator


class MessageCreate(BaseModel):
    """Schema for a contact form submission."""

    name: str = Field(..., examples=["Jane Doe"])
    email: EmailStr = Field(..., examples=["jane@example.com"])
    subject: str = Field(..., examples=["Project inquiry"])
    message: str = Field(..., examples=["Hi, I'd like to talk about a project."])

    @field_validator("name", "subject", "message")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class MessageRead(BaseModel):
    id: int
    name: str
    email: str
    subject: str
    message: str
    read: bool
    created_at: datetime
