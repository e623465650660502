"""SQLAlchemy ``TypeDecorator``s binding storage values to SQL columns.

Usable with SQLAlchemy Core tables:

    Column("created_at", TimestampColumn, nullable=False)
    Column("due_on", DateColumn)

``TimestampColumn`` keeps the full instant down to the millisecond.
``DateColumn`` binds ``SqlDate.calendar_date``, so the column itself
drops the time of day; values load back at midnight UTC.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from sqlalchemy import Date, DateTime
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from dateconv.domain.storage import SqlDate, SqlTimestamp


class TimestampColumn(TypeDecorator[SqlTimestamp]):
    """Date-and-time column holding :class:`SqlTimestamp` values."""

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Dialect) -> datetime | None:
        if value is None:
            return None
        if not isinstance(value, SqlTimestamp):
            msg = f"TimestampColumn expects SqlTimestamp, got {type(value).__name__}"
            raise TypeError(msg)
        return value.to_datetime()

    def process_result_value(self, value: Any, dialect: Dialect) -> SqlTimestamp | None:
        if value is None:
            return None
        return SqlTimestamp.from_datetime(value)


class DateColumn(TypeDecorator[SqlDate]):
    """Date-only column holding :class:`SqlDate` values."""

    impl = Date
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Dialect) -> date | None:
        if value is None:
            return None
        if not isinstance(value, SqlDate):
            msg = f"DateColumn expects SqlDate, got {type(value).__name__}"
            raise TypeError(msg)
        return value.calendar_date

    def process_result_value(self, value: Any, dialect: Dialect) -> SqlDate | None:
        if value is None:
            return None
        return SqlDate.from_date(value)
