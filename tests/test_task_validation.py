"""Unit tests for create-request validation and normalization."""

from datetime import datetime, timedelta, timezone

import pytest

from task_tracker.errors import TaskValidationError
from task_tracker.models.task import TaskStatus
from task_tracker.schemas.task import TaskCreate
from task_tracker.services.task_validation import (
    DUE_AT_IN_PAST_MESSAGE,
    TaskDraft,
    invalid_status_message,
    normalize_description,
    validate_and_build_draft,
)

pytestmark = pytest.mark.unit

NOW = datetime(2026, 3, 2, 9, 30, tzinfo=timezone.utc)


def make_request(**overrides) -> TaskCreate:
    data = {
        "title": "Prepare case file",
        "description": "Case 12345",
        "status": "New",
        "due_at": NOW + timedelta(hours=1),
    }
    data.update(overrides)
    return TaskCreate(**data)


def errors_for(request: TaskCreate) -> dict:
    with pytest.raises(TaskValidationError) as exc_info:
        validate_and_build_draft(request, now=NOW)
    return exc_info.value.errors


def test_valid_request_builds_draft():
    draft = validate_and_build_draft(make_request(), now=NOW)

    assert draft == TaskDraft(
        title="Prepare case file",
        description="Case 12345",
        status=TaskStatus.NEW,
        due_at=NOW + timedelta(hours=1),
        created_at=NOW,
    )


def test_title_and_description_are_trimmed():
    draft = validate_and_build_draft(
        make_request(title="  Trimmed title  ", description="  Trimmed description  "),
        now=NOW,
    )

    assert draft.title == "Trimmed title"
    assert draft.description == "Trimmed description"


@pytest.mark.parametrize("description", [None, "", "   ", "\t\n"])
def test_blank_description_becomes_absent(description):
    draft = validate_and_build_draft(make_request(description=description), now=NOW)

    assert draft.description is None


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("New", TaskStatus.NEW),
        ("inprogress", TaskStatus.IN_PROGRESS),
        ("INPROGRESS", TaskStatus.IN_PROGRESS),
        ("  completed ", TaskStatus.COMPLETED),
    ],
)
def test_status_is_parsed_case_insensitively(raw, expected):
    draft = validate_and_build_draft(make_request(status=raw), now=NOW)

    assert draft.status is expected


@pytest.mark.parametrize("raw", ["NotARealStatus", "In Progress", "1", "New,Completed"])
def test_unknown_status_is_rejected(raw):
    errors = errors_for(make_request(status=raw))

    assert errors == {"status": [invalid_status_message()]}
    assert "New, InProgress, Completed" in errors["status"][0]


def test_due_date_in_past_is_rejected():
    errors = errors_for(make_request(due_at=NOW - timedelta(minutes=5)))

    assert errors == {"dueAt": [DUE_AT_IN_PAST_MESSAGE]}


def test_due_date_equal_to_now_is_rejected():
    errors = errors_for(make_request(due_at=NOW))

    assert list(errors) == ["dueAt"]


def test_due_date_in_other_offset_is_compared_as_instant():
    plus_two = timezone(timedelta(hours=2))
    # 10:30 at +02:00 is 08:30 UTC, an hour before NOW
    errors = errors_for(make_request(due_at=datetime(2026, 3, 2, 10, 30, tzinfo=plus_two)))
    assert "dueAt" in errors

    due = datetime(2026, 3, 2, 12, 30, tzinfo=plus_two)
    draft = validate_and_build_draft(make_request(due_at=due), now=NOW)
    assert draft.due_at == due
    assert draft.due_at.utcoffset() == timedelta(hours=2)


def test_status_error_stops_before_due_date_check():
    errors = errors_for(make_request(status="bogus", due_at=NOW - timedelta(days=1)))

    assert list(errors) == ["status"]


def test_structural_errors_are_reported_together():
    errors = errors_for(
        TaskCreate(title=None, description="x" * 1001, status="   ", due_at=None)
    )

    assert set(errors) == {"title", "description", "status", "dueAt"}


def test_structural_errors_stop_before_status_check():
    errors = errors_for(make_request(title="", status="bogus"))

    assert list(errors) == ["title"]


@pytest.mark.parametrize("title", [None, "", "    "])
def test_missing_or_blank_title_is_required(title):
    errors = errors_for(make_request(title=title))

    assert errors == {"title": ["The title field is required."]}


def test_title_length_is_checked_before_trimming():
    assert validate_and_build_draft(make_request(title="a" * 200), now=NOW).title == "a" * 200

    errors = errors_for(make_request(title=" " + "a" * 200))
    assert "title" in errors


def test_description_length_limit():
    draft = validate_and_build_draft(make_request(description="d" * 1000), now=NOW)
    assert len(draft.description) == 1000

    errors = errors_for(make_request(description="d" * 1001))
    assert errors == {"description": ["The description field must be at most 1000 characters long."]}


def test_created_at_defaults_to_current_time():
    request = TaskCreate(title="Soon", status="New", due_at=datetime.now(timezone.utc) + timedelta(minutes=10))
    before = datetime.now(timezone.utc)

    draft = validate_and_build_draft(request)

    assert before <= draft.created_at <= datetime.now(timezone.utc)
    assert draft.created_at.tzinfo is not None


def test_normalize_description():
    assert normalize_description("  keep me ") == "keep me"
    assert normalize_description(" ") is None


def test_due_date_without_offset_is_reported_with_other_structural_errors():
    errors = errors_for(TaskCreate.model_validate({"status": "New", "dueAt": "2099-01-01T10:00:00"}))

    assert set(errors) == {"title", "dueAt"}
    assert "timezone" in errors["dueAt"][0]


def test_unparseable_due_date_is_a_structural_error():
    errors = errors_for(make_request(due_at="next tuesday", title=""))

    assert set(errors) == {"title", "dueAt"}


def test_due_date_string_keeps_its_offset():
    draft = validate_and_build_draft(make_request(due_at="2026-03-02T13:30:00+02:00"), now=NOW)

    assert draft.due_at == NOW + timedelta(hours=2)
    assert draft.due_at.utcoffset() == timedelta(hours=2)
    assert draft.due_at.isoformat() == "2026-03-02T13:30:00+02:00"
