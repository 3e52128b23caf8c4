"""
Task Manager API - Task Schemas

Pydantic models for task API requests and responses.
"""

from datetime import datetime
from typing import Optional, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaskCreateRequest(BaseModel):
    """Request model for creating a task."""

    title: str = Field(min_length=1, max_length=500, description="Task title", examples=["New Task"])
    description: Optional[str] = Field(
        default=None,
        max_length=5000,
        description="Task description",
        examples=["Description of the new task"],
    )


class TaskUpdateRequest(BaseModel):
    """Request model for a partial task update.

    Only the fields listed here may be changed; any other key is rejected.
    """

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(default=None, min_length=1, max_length=500, description="Task title")
    description: Optional[str] = Field(default=None, max_length=5000, description="Task description")
    completed: Optional[bool] = Field(default=None, description="Task completion status")

    @field_validator("title", "completed")
    @classmethod
    def not_null(cls, value):
        # Only reached when the key was sent; description alone may be cleared
        if value is None:
            raise ValueError("Field may not be null")
        return value


class TaskResponse(BaseModel):
    """Response model for a single task."""

    id: str = Field(description="Task ID")
    title: str = Field(description="Task title")
    description: Optional[str] = Field(default=None, description="Task description")
    completed: bool = Field(description="Task completion status")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")


class TaskPageResponse(BaseModel):
    """Response model for one page of tasks."""

    tasks: List[TaskResponse] = Field(description="Tasks on this page")
    current: int = Field(description="Current page number")
    total_page: int = Field(description="Total number of pages")
