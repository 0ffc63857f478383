"""Authentication schemas.

Request fields accept any JSON value; the rules live in ``src.validation`` so all
failures can be reported together.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.schemas.user import UserResponse


class _Request(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class RegisterRequest(_Request):
    """User registration request."""

    fullname: Any = None
    email: Any = None
    password: Any = None
    profile_image_url: Any = Field(None, alias="profileImageUrl")


class LoginRequest(_Request):
    """User login request."""

    email: Any = None
    password: Any = None


class ForgotPasswordRequest(_Request):
    """Request a password reset link."""

    email: Any = None


class ResetPasswordRequest(_Request):
    """Set a new password using a reset token."""

    password: Any = None


class ChangePasswordRequest(_Request):
    """Change password for the authenticated user."""

    current_password: Any = Field(None, alias="currentPassword")
    new_password: Any = Field(None, alias="newPassword")


class AuthData(BaseModel):
    """User projection plus a bearer token."""

    user: UserResponse
    token: str


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    success: bool = True
    message: str
    data: AuthData


class MeData(BaseModel):
    user: UserResponse


class MeResponse(BaseModel):
    success: bool = True
    data: MeData


class MessageResponse(BaseModel):
    """Success envelope without a payload."""

    success: bool = True
    message: str
