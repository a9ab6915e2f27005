"""
Task business logic service.
"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from task_tracker.errors import TaskValidationError
from task_tracker.repositories.task_repository import TaskRepository
from task_tracker.schemas.task import TaskCreate, TaskRead
from task_tracker.services.task_validation import validate_and_build_draft

logger = logging.getLogger(__name__)


class TaskService:
    """Service for task business logic."""

    def __init__(self, db: AsyncSession):
        self.repository = TaskRepository(db)

    async def create_task(self, data: TaskCreate, now: Optional[datetime] = None) -> TaskRead:
        """
        Validate, persist and shape a new task.

        Raises TaskValidationError before anything is written if the
        request is rejected.
        """
        logger.info("Received request to create task with title %r", data.title)

        try:
            draft = validate_and_build_draft(data, now=now)
        except TaskValidationError as exc:
            logger.warning("Task creation rejected: %s", exc.errors)
            raise

        task = await self.repository.insert(draft)
        logger.info("Task created with id %s and status %s", task.id, task.status.value)
        return TaskRead.from_entity(task)

    async def get_task(self, task_id: int) -> Optional[TaskRead]:
        """Get a task by ID."""
        logger.info("Fetching task with id %s", task_id)

        task = await self.repository.get_by_id(task_id)
        if task is None:
            logger.info("Task with id %s not found", task_id)
            return None

        return TaskRead.from_entity(task)
