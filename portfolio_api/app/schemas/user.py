"""
Pydantic models for admin users and authentication.

The password hash only ever appears on ``UserInDB``, which is used
inside the application; API responses use ``UserRead``.
"""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1, examples=["admin"])
    password: str = Field(..., min_length=1, examples=["strongpassword"])


class LoginRequest(BaseModel):
    """Credentials posted to ``/api/auth/login``."""

    username: str = Field(..., examples=["admin"])
    password: str = Field(..., examples=["admin123"])


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    username: str

    model_config = {
        "from_attributes": True,
    }


class UserInDB(UserRead):
    password_hash: str


class UserResponse(BaseModel):
    user: UserRead
