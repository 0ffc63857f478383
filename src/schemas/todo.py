"""Todo schemas."""

from datetime import datetime

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TodoCreate(BaseModel):
    """Create a new todo."""

    title: Any = None
    content: Any = None
    status: Any = None


class TodoUpdate(BaseModel):
    """Update a todo. Omitted fields are left unchanged."""

    title: Any = None
    content: Any = None
    status: Any = None


class TodoResponse(BaseModel):
    """Todo response."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    user_id: int = Field(alias="userId")
    title: str
    content: str
    status: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class PageLink(BaseModel):
    page: int
    limit: int


class Pagination(BaseModel):
    next: PageLink | None = None
    prev: PageLink | None = None


class TodoListResponse(BaseModel):
    """One page of todos."""

    success: bool = True
    count: int
    pagination: Pagination
    data: list[TodoResponse]


class TodoEnvelope(BaseModel):
    success: bool = True
    message: str | None = None
    data: TodoResponse


class TodoStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int
    completed: int
    pending: int
    completion_rate: float = Field(alias="completionRate")


class TodoStatsResponse(BaseModel):
    success: bool = True
    data: TodoStats
