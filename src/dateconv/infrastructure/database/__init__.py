"""SQLAlchemy column types for dateconv storage values."""

from dateconv.infrastructure.database.types import DateColumn, TimestampColumn

__all__ = [
    "DateColumn",
    "TimestampColumn",
]
