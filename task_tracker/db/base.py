"""
SQLAlchemy declarative base.

All models inherit from this Base class so that their tables are
registered on a single metadata object (used by alembic and create_all).
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass
