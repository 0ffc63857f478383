"""User profile API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.api.dependencies import get_current_user
from src.database import get_db
from src.errors import ConflictError
from src.models.user import User
from src.schemas.auth import MessageResponse
from src.schemas.user import ProfileResponse, ProfileUpdate, UserResponse
from src.services.auth_service import get_user_by_email
from src.validation import check_profile_update, normalize_email

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/profile", response_model=ProfileResponse)
def get_profile(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get the authenticated user's profile."""
    return ProfileResponse(data=UserResponse.model_validate(current_user))


@router.put("/profile", response_model=ProfileResponse)
def update_profile(
    profile_data: ProfileUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update name, email, or profile image."""
    check_profile_update(profile_data)

    if profile_data.email:
        email = normalize_email(profile_data.email)
        if email != current_user.email:
            if get_user_by_email(db, email):
                raise ConflictError("Email is already taken")
            current_user.email = email

    if profile_data.fullname:
        current_user.fullname = profile_data.fullname.strip()
    if profile_data.profile_image_url is not None:
        current_user.profile_image_url = profile_data.profile_image_url or None

    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("Email is already taken") from e
    db.refresh(current_user)

    return ProfileResponse(
        message="Profile updated successfully",
        data=UserResponse.model_validate(current_user),
    )


@router.delete("/profile", response_model=MessageResponse)
def delete_profile(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete the account and every todo it owns."""
    user_id = current_user.id
    db.delete(current_user)
    db.commit()

    logger.info(f"Deleted user {user_id}")
    return MessageResponse(message="Account deleted successfully")
