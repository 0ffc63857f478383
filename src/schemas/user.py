"""User schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """Public user projection. Never carries password or reset fields."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    fullname: str
    email: str
    profile_image_url: str | None = Field(None, alias="profileImageUrl")


class ProfileUpdate(BaseModel):
    """Update the authenticated user's profile."""

    model_config = ConfigDict(populate_by_name=True)

    fullname: Any = None
    email: Any = None
    profile_image_url: Any = Field(None, alias="profileImageUrl")


class ProfileResponse(BaseModel):
    success: bool = True
    message: str | None = None
    data: UserResponse
