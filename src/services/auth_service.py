"""Authentication flows: registration, login, and password management."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.config import get_settings
from src.errors import (
    BadRequestError,
    ConflictError,
    DeliveryFailureError,
    NotFoundError,
    UnauthorizedError,
)
from src.models.user import User
from src.services.email_service import EmailService
from src.services.passwords import hash_password, verify_password
from src.services.reset_tokens import generate_reset_token, hash_reset_token, verify_reset_token
from src.services.tokens import create_access_token
from src.validation import normalize_email

logger = logging.getLogger(__name__)


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email, case-insensitively."""
    return db.query(User).filter(User.email == normalize_email(email)).first()


class AuthService:
    """Orchestrates the credential flows over one database session."""

    def __init__(self, db: Session, email_service: EmailService | None = None):
        self.db = db
        self.email_service = email_service or EmailService()

    def register(
        self,
        fullname: str,
        email: str,
        password: str,
        profile_image_url: str | None = None,
    ) -> tuple[User, str]:
        """Create a user and return it with a fresh access token."""
        if get_user_by_email(self.db, email):
            raise ConflictError()

        user = User(
            fullname=fullname,
            email=normalize_email(email),
            password_hash=hash_password(password),
            profile_image_url=profile_image_url or None,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            # A concurrent registration won the unique index
            self.db.rollback()
            raise ConflictError() from e
        self.db.refresh(user)

        logger.info(f"Registered user {user.id}")
        return user, create_access_token(user.id)

    def authenticate(self, email: str, password: str) -> tuple[User, str]:
        """Check credentials and return the user with a fresh access token.

        Unknown email and wrong password fail identically.
        """
        user = get_user_by_email(self.db, email)
        if not user or not verify_password(password, user.password_hash):
            logger.info("Failed login attempt")
            raise UnauthorizedError("Invalid credentials")
        return user, create_access_token(user.id)

    def forgot_password(self, email: str) -> None:
        """Issue a reset token and mail the reset link.

        The raw token is never returned. If the mail cannot be sent the stored
        token is cleared again so no usable token is left behind.
        """
        user = get_user_by_email(self.db, email)
        if not user:
            raise NotFoundError("User not found")

        reset = generate_reset_token()
        # Partial update: only the two reset columns change
        user.set_reset_token(reset.token_hash, reset.expires_at)
        self.db.commit()

        reset_url = f"{get_settings().frontend_url.rstrip('/')}/reset-password/{reset.token}"
        if not self.email_service.send_password_reset_email(user.email, reset_url):
            user.clear_reset_token()
            self.db.commit()
            logger.warning(f"Password reset email for user {user.id} could not be sent")
            raise DeliveryFailureError()

        logger.info(f"Password reset email sent for user {user.id}")

    def reset_password(self, token: str, new_password: str) -> tuple[User, str]:
        """Consume a reset token, set the new password, and log the user in."""
        user = (
            self.db.query(User)
            .filter(User.reset_password_token == hash_reset_token(token))
            .first()
        )
        if not user or not verify_reset_token(
            token, user.reset_password_token, user.reset_password_expire
        ):
            raise BadRequestError("Invalid or expired reset token")

        user.password_hash = hash_password(new_password)
        user.clear_reset_token()
        self.db.commit()
        self.db.refresh(user)

        logger.info(f"Password reset for user {user.id}")
        return user, create_access_token(user.id)

    def change_password(self, user_id: int, current_password: str, new_password: str) -> None:
        """Change the password of an authenticated user. Existing tokens stay valid."""
        user = self.db.get(User, user_id)
        if user is None:
            raise UnauthorizedError("User no longer exists")
        if not verify_password(current_password, user.password_hash):
            raise BadRequestError("Current password is incorrect")

        user.password_hash = hash_password(new_password)
        # A pending reset link must not outlive the password it was issued for
        user.clear_reset_token()
        self.db.commit()
        logger.info(f"Password changed for user {user.id}")
