"""
Main FastAPI application.

This is the entry point for the API server:

    uvicorn task_tracker.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from task_tracker import __version__
from task_tracker.core.config import settings
from task_tracker.core.logging import setup_logging
from task_tracker.db.session import create_schema, engine
from task_tracker.errors import AppError, app_error_handler, request_validation_error_handler
from task_tracker.routers import health, task

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for the FastAPI app.

    On startup: configure logging and make sure the task table exists.
    On shutdown: dispose of the connection pool.
    """
    setup_logging()
    logger.info("Starting %s", settings.APP_NAME)

    if settings.AUTO_CREATE_SCHEMA:
        await create_schema()

    yield

    logger.info("Shutting down %s", settings.APP_NAME)
    await engine.dispose()


def create_app() -> FastAPI:
    application = FastAPI(
        title=settings.APP_NAME,
        description="Create tasks and retrieve them by id",
        version=__version__,
        lifespan=lifespan,
    )

    application.add_exception_handler(AppError, app_error_handler)
    application.add_exception_handler(RequestValidationError, request_validation_error_handler)

    application.include_router(health.router, tags=["Health"])
    application.include_router(task.router)
    return application


app = create_app()
