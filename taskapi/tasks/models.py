"""
Task Manager API - Task Models

Internal task model for database operations.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
import uuid


def _utcnow() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


@dataclass
class Task:
    """Task entity for database storage."""

    id: str
    title: str
    description: Optional[str] = None
    completed: bool = False
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def create(cls, title: str, description: Optional[str] = None) -> "Task":
        """Create a new, not yet completed task with generated ID."""
        now = _utcnow()
        return cls(
            id=str(uuid.uuid4()),
            title=title,
            description=description,
            completed=False,
            created_at=now,
            updated_at=now,
        )

    def to_dict(self) -> dict:
        """Convert task to dictionary for MongoDB storage."""
        return {
            "_id": self.id,
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Create task from MongoDB document."""
        return cls(
            id=data["_id"],
            title=data["title"],
            description=data.get("description"),
            completed=data.get("completed", False),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
