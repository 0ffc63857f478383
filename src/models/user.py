"""User model."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and todo ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    fullname = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    profile_image_url = Column(String(2048), nullable=True)

    # Only the SHA-256 of the emailed token is stored; both columns are set or both null
    reset_password_token = Column(String(64), nullable=True, index=True)
    reset_password_expire = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    todos = relationship(
        "Todo",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    def set_reset_token(self, token_hash: str, expires_at) -> None:
        """Store a pending password reset."""
        self.reset_password_token = token_hash
        self.reset_password_expire = expires_at

    def clear_reset_token(self) -> None:
        """Forget any pending password reset."""
        self.reset_password_token = None
        self.reset_password_expire = None
