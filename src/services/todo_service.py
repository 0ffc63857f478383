"""Todo service for per-user todo operations."""

import logging

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from src.errors import NotFoundError
from src.models.enums import TodoStatus
from src.models.todo import Todo

logger = logging.getLogger(__name__)


def _like_pattern(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class TodoService:
    """Service for todo-related operations. Every query is scoped to one owner."""

    def __init__(self, db: Session):
        self.db = db

    def list_todos(
        self,
        user_id: int,
        page: int = 1,
        limit: int = 10,
        status: str | None = None,
        search: str | None = None,
    ) -> tuple[list[Todo], int]:
        """Return one page of the user's todos, newest first, and the total match count."""
        query = self.db.query(Todo).filter(Todo.user_id == user_id)

        if status:
            query = query.filter(Todo.status == status)

        if search:
            pattern = _like_pattern(search)
            query = query.filter(
                or_(
                    Todo.title.ilike(pattern, escape="\\"),
                    Todo.content.ilike(pattern, escape="\\"),
                )
            )

        total = query.count()
        todos = (
            query.order_by(Todo.created_at.desc(), Todo.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return todos, total

    def get_todo(self, user_id: int, todo_id: int) -> Todo:
        """Get a todo owned by the user. Other users' todos are reported as missing."""
        todo = self.db.query(Todo).filter(Todo.id == todo_id, Todo.user_id == user_id).first()
        if not todo:
            raise NotFoundError("Todo not found")
        return todo

    def create_todo(
        self, user_id: int, title: str, content: str, status: str | None = None
    ) -> Todo:
        todo = Todo(
            user_id=user_id,
            title=title,
            content=content,
            status=status or TodoStatus.PENDING.value,
        )
        self.db.add(todo)
        self.db.commit()
        self.db.refresh(todo)
        return todo

    def update_todo(
        self,
        user_id: int,
        todo_id: int,
        title: str | None = None,
        content: str | None = None,
        status: str | None = None,
    ) -> Todo:
        todo = self.get_todo(user_id, todo_id)

        if title is not None:
            todo.title = title
        if content is not None:
            todo.content = content
        if status is not None:
            todo.status = status

        self.db.commit()
        self.db.refresh(todo)
        return todo

    def delete_todo(self, user_id: int, todo_id: int) -> None:
        todo = self.get_todo(user_id, todo_id)
        self.db.delete(todo)
        self.db.commit()

    def toggle_todo(self, user_id: int, todo_id: int) -> Todo:
        """Flip a todo between pending and completed."""
        todo = self.get_todo(user_id, todo_id)
        todo.status = TodoStatus(todo.status).toggled().value
        self.db.commit()
        self.db.refresh(todo)
        return todo

    def get_stats(self, user_id: int) -> dict[str, int | float]:
        """Count the user's todos by status."""
        rows = (
            self.db.query(Todo.status, func.count(Todo.id))
            .filter(Todo.user_id == user_id)
            .group_by(Todo.status)
            .all()
        )
        counts = dict(rows)
        completed = counts.get(TodoStatus.COMPLETED.value, 0)
        pending = counts.get(TodoStatus.PENDING.value, 0)
        total = sum(counts.values())
        completion_rate = round(completed / total * 100, 2) if total else 0
        return {
            "total": total,
            "completed": completed,
            "pending": pending,
            "completion_rate": completion_rate,
        }
