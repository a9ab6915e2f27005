"""
Schemas package.

Import all schemas here for easy access.
"""

from task_tracker.schemas.task import TaskCreate, TaskRead

__all__ = [
    # Task
    "TaskCreate", "TaskRead",
]
