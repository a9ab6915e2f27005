"""
Task router - API endpoints for tasks.
"""

import re

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from task_tracker.db.session import get_db
from task_tracker.errors import TaskValidationError, ValidationProblem
from task_tracker.schemas.task import TaskCreate, TaskRead
from task_tracker.services.task_service import TaskService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])

# Longer digit strings are beyond any id the database can hold
TASK_ID_PATTERN = re.compile(r"-?[0-9]{1,20}")


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Validation problem"}},
)
async def create_task(
    data: TaskCreate,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    """Create a new task."""
    service = TaskService(db)
    try:
        task = await service.create_task(data)
    except TaskValidationError as exc:
        raise ValidationProblem(exc.errors) from exc

    response.headers["Location"] = str(request.url_for("get_task", task_id=task.id))
    return task


@router.get(
    "/{task_id}",
    response_model=TaskRead,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Task not found"}},
)
async def get_task(
    task_id: str,
    db: AsyncSession = Depends(get_db),
):
    """
    Get a task by ID.

    Anything that is not an integer can never name a task, so it gets the
    same empty 404 as an unknown id rather than a validation problem.
    """
    if not TASK_ID_PATTERN.fullmatch(task_id):
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    service = TaskService(db)
    task = await service.get_task(int(task_id))

    if task is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    return task
