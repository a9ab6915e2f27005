"""
Task model.

Represents a single tracked task with a due date.
"""

import enum
from datetime import datetime
from typing import Optional

from sqlalchemy import Enum as SQLEnum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from task_tracker.db.base import Base
from task_tracker.db.types import OffsetDateTime


TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000

# Largest value of the 32-bit integer id column
MAX_TASK_ID = 2**31 - 1


class TaskStatus(str, enum.Enum):
    """Closed set of task statuses. Values are the canonical display strings."""

    NEW = "New"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["TaskStatus"]:
        """
        Case-insensitive lookup by display string.

        Surrounding whitespace is ignored. Returns None when the value does
        not name a member.
        """
        if value is None:
            return None
        wanted = value.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return None

    @classmethod
    def display_names(cls) -> str:
        return ", ".join(member.value for member in cls)


class Task(Base):
    """
    Task table - one row per task.

    Rows are written once by the create workflow and only read afterwards.
    """

    __tablename__ = "task"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    title: Mapped[str] = mapped_column(
        String(TITLE_MAX_LENGTH),
        nullable=False,
    )

    description: Mapped[Optional[str]] = mapped_column(
        String(DESCRIPTION_MAX_LENGTH),
        nullable=True,
    )

    # Stored as "New" / "InProgress" / "Completed"
    status: Mapped[TaskStatus] = mapped_column(
        SQLEnum(
            TaskStatus,
            name="task_status",
            native_enum=False,
            length=20,
            values_callable=lambda statuses: [s.value for s in statuses],
            validate_strings=True,
            create_constraint=True,
        ),
        nullable=False,
    )

    due_at: Mapped[datetime] = mapped_column(
        OffsetDateTime(),
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        OffsetDateTime(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Task id={self.id} status={self.status.value if self.status else None}>"
