"""Enums for model fields."""

from enum import Enum


class TodoStatus(str, Enum):
    """Lifecycle state of a todo."""

    PENDING = "pending"
    COMPLETED = "completed"

    def toggled(self) -> "TodoStatus":
        """Return the opposite status."""
        return TodoStatus.COMPLETED if self == TodoStatus.PENDING else TodoStatus.PENDING
