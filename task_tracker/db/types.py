"""Column types shared by the models."""

from datetime import datetime
from typing import Optional

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator

# Longest isoformat(): 2026-10-19T09:30:00.123456+05:30
OFFSET_DATETIME_LENGTH = 40


class OffsetDateTime(TypeDecorator):
    """
    Timezone-aware timestamp stored as ISO-8601 text.

    The offset the caller sent is kept as-is, on every backend, so a value
    reads back exactly as it was written (``+02:00`` stays ``+02:00``).
    """

    impl = String(OFFSET_DATETIME_LENGTH)
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect) -> Optional[str]:
        if value is None:
            return None
        if value.tzinfo is None:
            raise ValueError("OffsetDateTime requires a timezone-aware datetime")
        return value.isoformat()

    def process_result_value(self, value: Optional[str], dialect) -> Optional[datetime]:
        if value is None:
            return None
        return datetime.fromisoformat(value)
