"""
Models package.

Import all models here so they are registered with SQLAlchemy.
"""

from task_tracker.models.task import Task, TaskStatus

__all__ = ["Task", "TaskStatus"]
