"""Instant — a point in time as signed milliseconds since the Unix epoch.

No time zone is attached. Wherever calendar fields are needed they are
read in UTC, so the same instant always renders the same date.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta

from pydantic import BaseModel, Field

from dateconv.domain.durations import DAY, INT64_MAX, INT64_MIN
from dateconv.domain.errors import InstantOverflowError

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MS = timedelta(milliseconds=1)


class Instant(BaseModel):
    """Immutable epoch-millisecond value."""

    model_config = {"frozen": True, "strict": True}

    epoch_ms: int = Field(ge=INT64_MIN, le=INT64_MAX)

    @classmethod
    def from_datetime(cls, dt: datetime) -> Instant:
        """Build an instant from *dt*; naive datetimes are read as UTC.

        Sub-millisecond precision is floored.
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        return cls(epoch_ms=(dt - EPOCH) // _ONE_MS)

    @classmethod
    def from_date(cls, d: date) -> Instant:
        """Midnight UTC of *d*.

        A ``datetime`` contributes only its calendar date.
        """
        if isinstance(d, datetime):
            d = d.date()
        return cls(epoch_ms=(d - EPOCH.date()).days * DAY)

    @classmethod
    def now(cls) -> Instant:
        return cls.from_datetime(datetime.now(UTC))

    def to_datetime(self) -> datetime:
        """Aware UTC datetime for this instant.

        Raises:
            InstantOverflowError: If the instant falls outside years 1..9999.
        """
        try:
            return EPOCH + timedelta(milliseconds=self.epoch_ms)
        except OverflowError as exc:
            msg = f"Instant {self.epoch_ms} is outside the representable calendar range"
            raise InstantOverflowError(msg) from exc

    def start_of_day(self) -> Instant:
        """This instant floored to midnight UTC."""
        return Instant(epoch_ms=self.epoch_ms - self.epoch_ms % DAY)
