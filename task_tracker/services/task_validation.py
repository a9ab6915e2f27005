"""
Validation and normalization of task create requests.

``validate_and_build_draft`` turns an untrusted ``TaskCreate`` into a
``TaskDraft`` ready for insertion, or raises ``TaskValidationError`` with a
field error map. Checks run in stages and stop at the first failing stage:

1. structural checks (presence, length, due date format) - all offending
   fields reported
2. status must name a ``TaskStatus`` member (case-insensitive)
3. due date must be strictly after "now"

No I/O happens here; the clock is read once and can be passed in.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from pydantic import AwareDatetime, TypeAdapter, ValidationError

from task_tracker.errors import FieldErrors, TaskValidationError
from task_tracker.models.task import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH, TaskStatus
from task_tracker.schemas.task import TaskCreate
from task_tracker.utils.time import utc_now


DUE_AT_IN_PAST_MESSAGE = "Due date and time must be in the future."

_due_at_adapter = TypeAdapter(AwareDatetime)


@dataclass(frozen=True)
class TaskDraft:
    """Normalized task fields that have not been persisted yet."""

    title: str
    description: Optional[str]
    status: TaskStatus
    due_at: datetime
    created_at: datetime


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _required_message(field: str) -> str:
    return f"The {field} field is required."


def _max_length_message(field: str, max_length: int) -> str:
    return f"The {field} field must be at most {max_length} characters long."


def invalid_status_message() -> str:
    return f"Status must be one of: {TaskStatus.display_names()}."


def parse_due_at(value: Any) -> datetime:
    """
    Parse a due date sent as an ISO-8601 string (or given as a datetime).

    Raises ValueError with a readable message for unparseable values and
    for timestamps without an offset.
    """
    try:
        return _due_at_adapter.validate_python(value)
    except ValidationError as exc:
        raise ValueError(exc.errors()[0]["msg"]) from exc


def check_structure(request: TaskCreate) -> FieldErrors:
    """Presence, length and due date format checks. Lengths are measured before trimming."""
    errors: FieldErrors = {}

    if _is_blank(request.title):
        errors.setdefault("title", []).append(_required_message("title"))
    elif len(request.title) > TITLE_MAX_LENGTH:
        errors.setdefault("title", []).append(_max_length_message("title", TITLE_MAX_LENGTH))

    if request.description is not None and len(request.description) > DESCRIPTION_MAX_LENGTH:
        errors.setdefault("description", []).append(
            _max_length_message("description", DESCRIPTION_MAX_LENGTH)
        )

    if _is_blank(request.status):
        errors.setdefault("status", []).append(_required_message("status"))

    if request.due_at is None:
        errors.setdefault("dueAt", []).append(_required_message("dueAt"))
    else:
        try:
            parse_due_at(request.due_at)
        except ValueError as exc:
            errors.setdefault("dueAt", []).append(str(exc))

    return errors


def normalize_description(description: Optional[str]) -> Optional[str]:
    """Empty and whitespace-only descriptions are stored as absent."""
    if _is_blank(description):
        return None
    return description.strip()


def validate_and_build_draft(request: TaskCreate, now: Optional[datetime] = None) -> TaskDraft:
    """
    Validate a create request and build the draft to insert.

    Args:
        request: Parsed request body
        now: Validation instant; defaults to the current UTC time. The same
            value is compared against ``due_at`` and used as ``created_at``.

    Returns:
        The normalized ``TaskDraft``

    Raises:
        TaskValidationError: with the field error map of the first failing stage
    """
    errors = check_structure(request)
    if errors:
        raise TaskValidationError(errors)

    status = TaskStatus.parse(request.status)
    if status is None:
        raise TaskValidationError({"status": [invalid_status_message()]})

    if now is None:
        now = utc_now()

    due_at = parse_due_at(request.due_at)
    if due_at <= now:
        raise TaskValidationError({"dueAt": [DUE_AT_IN_PAST_MESSAGE]})

    return TaskDraft(
        title=request.title.strip(),
        description=normalize_description(request.description),
        status=status,
        due_at=due_at,
        created_at=now,
    )
