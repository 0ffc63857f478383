"""Todo model."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.enums import TodoStatus
from src.models.mixins import TimestampMixin


class Todo(Base, TimestampMixin):
    """A single todo owned by one user."""

    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(200), nullable=False)
    content = Column(String(1000), nullable=False)
    status = Column(String(20), nullable=False, default=TodoStatus.PENDING.value, index=True)

    # Relationships
    user = relationship("User", back_populates="todos")
