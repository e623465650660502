"""Storage values — instants wrapped for SQL date/time columns.

``SqlTimestamp`` targets date-and-time columns and keeps the full
instant. ``SqlDate`` targets date-only columns. It still retains the
full millisecond value it was built from; only ``calendar_date`` (and
the column type that binds it) drops the time of day.
"""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field

from dateconv.domain.durations import INT64_MAX, INT64_MIN
from dateconv.domain.instant import Instant


class StorageValue(BaseModel):
    """Common base: an epoch-millisecond value bound for a SQL column."""

    model_config = {"frozen": True, "strict": True}

    epoch_ms: int = Field(ge=INT64_MIN, le=INT64_MAX)

    def to_instant(self) -> Instant:
        return Instant(epoch_ms=self.epoch_ms)


class SqlTimestamp(StorageValue):
    """Value for a date-and-time column."""

    @classmethod
    def from_datetime(cls, dt: datetime) -> SqlTimestamp:
        """Build from a driver datetime; naive values are read as UTC."""
        return cls(epoch_ms=Instant.from_datetime(dt).epoch_ms)

    def to_datetime(self) -> datetime:
        """Naive UTC datetime, the form SQL drivers bind."""
        return self.to_instant().to_datetime().replace(tzinfo=None)


class SqlDate(StorageValue):
    """Value for a date-only column."""

    @classmethod
    def from_date(cls, d: date) -> SqlDate:
        """Build from a driver date, at midnight UTC."""
        return cls(epoch_ms=Instant.from_date(d).epoch_ms)

    @property
    def calendar_date(self) -> date:
        """The UTC calendar date, with the time of day dropped."""
        return self.to_instant().to_datetime().date()
