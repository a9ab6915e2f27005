"""
Task Pydantic schemas.
"""

from typing import Any, Optional
from datetime import datetime

from pydantic import Field

from task_tracker.models.task import Task
from task_tracker.schemas.base import CamelModel


class TaskCreate(CamelModel):
    """
    Schema for creating a new task (request body).

    Only string types are enforced here. ``due_at`` is kept as sent and
    parsed by ``services.task_validation`` together with the presence and
    length checks, so one request reports all of its field errors at once.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    due_at: Any = Field(
        default=None,
        json_schema_extra={"type": "string", "format": "date-time"},
    )


class TaskRead(CamelModel):
    """Schema for reading task data (API response)."""

    id: int
    title: str
    description: Optional[str] = None
    status: str
    due_at: datetime
    created_at: datetime

    @classmethod
    def from_entity(cls, task: Task) -> "TaskRead":
        """Shape a persisted task; status becomes its display string (e.g. InProgress)."""
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status.value,
            due_at=task.due_at,
            created_at=task.created_at,
        )
