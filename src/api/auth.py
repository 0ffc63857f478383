"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_auth_service, get_current_user
from src.models.user import User
from src.schemas.auth import (
    AuthData,
    AuthResponse,
    ChangePasswordRequest,
    ForgotPasswordRequest,
    LoginRequest,
    MeData,
    MeResponse,
    MessageResponse,
    RegisterRequest,
    ResetPasswordRequest,
)
from src.schemas.user import UserResponse
from src.services.auth_service import AuthService
from src.validation import (
    check_change_password,
    check_forgot_password,
    check_login,
    check_register,
    check_reset_password,
)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _auth_response(message: str, user: User, token: str) -> AuthResponse:
    return AuthResponse(
        message=message,
        data=AuthData(user=UserResponse.model_validate(user), token=token),
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: RegisterRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user."""
    check_register(user_data)

    user, token = auth_service.register(
        fullname=user_data.fullname,
        email=user_data.email,
        password=user_data.password,
        profile_image_url=user_data.profile_image_url,
    )
    return _auth_response("User registered successfully", user, token)


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with email and password."""
    check_login(credentials)

    user, token = auth_service.authenticate(credentials.email, credentials.password)
    return _auth_response("Login successful", user, token)


@router.get("/me", response_model=MeResponse)
def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return MeResponse(data=MeData(user=UserResponse.model_validate(current_user)))


@router.post("/forgot-password", response_model=MessageResponse)
def forgot_password(
    request_data: ForgotPasswordRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Email a password reset link."""
    check_forgot_password(request_data)

    auth_service.forgot_password(request_data.email)
    return MessageResponse(message="Email sent")


@router.put("/reset-password/{resettoken}", response_model=AuthResponse)
def reset_password(
    resettoken: str,
    request_data: ResetPasswordRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Set a new password using the token from the reset link."""
    check_reset_password(request_data)

    user, token = auth_service.reset_password(resettoken, request_data.password)
    return _auth_response("Password reset successful", user, token)


@router.put("/change-password", response_model=MessageResponse)
def change_password(
    request_data: ChangePasswordRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Change the password of the authenticated user."""
    check_change_password(request_data)

    auth_service.change_password(
        current_user.id, request_data.current_password, request_data.new_password
    )
    return MessageResponse(message="Password changed successfully")
