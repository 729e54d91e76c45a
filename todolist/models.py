"""Pydantic models for request/response validation."""

from pydantic import BaseModel, ConfigDict


class TodoCreate(BaseModel):
    """Model for creating a new todo."""

    text: str = ""


class TodoUpdate(BaseModel):
    """Model for toggling a todo."""

    completed: bool


class Todo(BaseModel):
    """Model for todo response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    text: str
    completed: bool
