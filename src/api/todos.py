"""Todo API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from src.api.dependencies import get_current_user, get_todo_service
from src.models.user import User
from src.schemas.auth import MessageResponse
from src.schemas.todo import (
    PageLink,
    Pagination,
    TodoCreate,
    TodoEnvelope,
    TodoListResponse,
    TodoResponse,
    TodoStats,
    TodoStatsResponse,
    TodoUpdate,
)
from src.services.todo_service import TodoService
from src.validation import check_todo_create, check_todo_update, raise_for_errors, validate_status

router = APIRouter(prefix="/api/todos", tags=["todos"])


@router.get("", response_model=TodoListResponse)
def get_todos(
    current_user: Annotated[User, Depends(get_current_user)],
    todo_service: Annotated[TodoService, Depends(get_todo_service)],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    status: str | None = Query(default=None, description="pending or completed"),
    search: str | None = Query(default=None, description="Match in title or content"),
):
    """Get one page of the current user's todos."""
    raise_for_errors(validate_status(status))

    todos, total = todo_service.list_todos(
        current_user.id, page=page, limit=limit, status=status, search=search
    )

    pagination = Pagination()
    if page * limit < total:
        pagination.next = PageLink(page=page + 1, limit=limit)
    if page > 1:
        pagination.prev = PageLink(page=page - 1, limit=limit)

    return TodoListResponse(
        count=len(todos),
        pagination=pagination,
        data=[TodoResponse.model_validate(t) for t in todos],
    )


@router.get("/stats/summary", response_model=TodoStatsResponse)
def get_todo_stats(
    current_user: Annotated[User, Depends(get_current_user)],
    todo_service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Get counts of the current user's todos by status."""
    return TodoStatsResponse(data=TodoStats(**todo_service.get_stats(current_user.id)))


@router.get("/{todo_id}", response_model=TodoEnvelope)
def get_todo(
    todo_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    todo_service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Get a single todo."""
    todo = todo_service.get_todo(current_user.id, todo_id)
    return TodoEnvelope(data=TodoResponse.model_validate(todo))


@router.post("", response_model=TodoEnvelope, status_code=status.HTTP_201_CREATED)
def create_todo(
    todo_data: TodoCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    todo_service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Create a new todo."""
    check_todo_create(todo_data)

    todo = todo_service.create_todo(
        current_user.id, todo_data.title, todo_data.content, todo_data.status
    )
    return TodoEnvelope(
        message="Todo created successfully", data=TodoResponse.model_validate(todo)
    )


@router.put("/{todo_id}", response_model=TodoEnvelope)
def update_todo(
    todo_id: int,
    todo_data: TodoUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    todo_service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Update a todo."""
    check_todo_update(todo_data)

    todo = todo_service.update_todo(
        current_user.id,
        todo_id,
        title=todo_data.title,
        content=todo_data.content,
        status=todo_data.status,
    )
    return TodoEnvelope(
        message="Todo updated successfully", data=TodoResponse.model_validate(todo)
    )


@router.delete("/{todo_id}", response_model=MessageResponse)
def delete_todo(
    todo_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    todo_service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Delete a todo."""
    todo_service.delete_todo(current_user.id, todo_id)
    return MessageResponse(message="Todo deleted successfully")


@router.patch("/{todo_id}/toggle", response_model=TodoEnvelope)
def toggle_todo(
    todo_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    todo_service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Toggle a todo between pending and completed."""
    todo = todo_service.toggle_todo(current_user.id, todo_id)
    return TodoEnvelope(
        message="Todo status toggled successfully", data=TodoResponse.model_validate(todo)
    )
