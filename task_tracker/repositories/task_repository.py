"""
Task repository - database operations for Task.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from task_tracker.models.task import MAX_TASK_ID, Task
from task_tracker.services.task_validation import TaskDraft


class TaskRepository:
    """Repository for Task database operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(self, draft: TaskDraft) -> Task:
        """
        Persist a validated draft.

        The database assigns the id during flush; the surrounding session
        commits (or rolls back) at the end of the request.
        """
        task = Task(
            title=draft.title,
            description=draft.description,
            status=draft.status,
            due_at=draft.due_at,
            created_at=draft.created_at,
        )
        self.db.add(task)
        await self.db.flush()
        await self.db.refresh(task)
        return task

    async def get_by_id(self, task_id: int) -> Optional[Task]:
        """Get a task by ID, or None if there is no such row."""
        if not 1 <= task_id <= MAX_TASK_ID:
            # Outside the id column range, so never issued
            return None
        result = await self.db.execute(
            select(Task).where(Task.id == task_id)
        )
        return result.scalar_one_or_none()
