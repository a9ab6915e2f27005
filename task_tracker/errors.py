"""Structured error helpers for API responses."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Field name (as sent on the wire) -> human readable messages
FieldErrors = Dict[str, List[str]]

VALIDATION_PROBLEM_TYPE = "https://tools.ietf.org/html/rfc9110#section-15.5.1"
VALIDATION_PROBLEM_TITLE = "One or more validation errors occurred."


def build_error_payload(code: str, message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    payload = {"error": {"code": code, "message": message}}
    if details is not None:
        payload["error"]["details"] = details
    return payload


def build_validation_problem(errors: FieldErrors) -> Dict[str, Any]:
    """Body of a 400 response listing the offending fields."""
    return {
        "type": VALIDATION_PROBLEM_TYPE,
        "title": VALIDATION_PROBLEM_TITLE,
        "status": status.HTTP_400_BAD_REQUEST,
        "errors": {field: list(messages) for field, messages in errors.items()},
    }


class AppError(Exception):
    """Application-scoped error for standardized API responses."""

    def __init__(self, status_code: int, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = build_error_payload(code, message, details)


class ValidationProblem(AppError):
    """400 response carrying a field error map."""

    def __init__(self, errors: FieldErrors):
        super().__init__(status.HTTP_400_BAD_REQUEST, "validation_failed", VALIDATION_PROBLEM_TITLE)
        self.errors = errors
        self.payload = build_validation_problem(errors)


class TaskValidationError(Exception):
    """Raised when a create request fails validation. Nothing has been written."""

    def __init__(self, errors: FieldErrors):
        super().__init__(", ".join(sorted(errors)))
        self.errors = errors


async def app_error_handler(_: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.payload)


def field_errors_from_request_validation(exc: RequestValidationError) -> FieldErrors:
    """Group FastAPI/Pydantic parsing errors by wire field name."""
    errors: FieldErrors = {}
    for error in exc.errors():
        loc = [part for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        # JSON decode errors carry a character offset instead of a field name
        field = loc[0] if loc and isinstance(loc[0], str) else "body"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value."))
    return errors


async def request_validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request parsing failures as a 400 validation problem instead of 422."""
    problem = ValidationProblem(field_errors_from_request_validation(exc))
    return JSONResponse(status_code=problem.status_code, content=problem.payload)

