"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import (
    AuthResponse,
    ChangePasswordRequest,
    ForgotPasswordRequest,
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
)
from src.schemas.todo import TodoCreate, TodoResponse, TodoUpdate
from src.schemas.user import ProfileUpdate, UserResponse

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "ForgotPasswordRequest",
    "ResetPasswordRequest",
    "ChangePasswordRequest",
    "AuthResponse",
    "UserResponse",
    "ProfileUpdate",
    "TodoCreate",
    "TodoUpdate",
    "TodoResponse",
]
