"""Conversion between instants and SQL storage values.

``None`` always maps to ``None``; every other value keeps its epoch
milliseconds unchanged in both directions.
"""

from __future__ import annotations

from dateconv.domain.instant import Instant
from dateconv.domain.storage import SqlDate, SqlTimestamp, StorageValue


def to_timestamp_storage(instant: Instant | None) -> SqlTimestamp | None:
    """Wrap *instant* for a date-and-time column."""
    return None if instant is None else SqlTimestamp(epoch_ms=instant.epoch_ms)


def to_date_storage(instant: Instant | None) -> SqlDate | None:
    """Wrap *instant* for a date-only column.

    The full millisecond value is retained, not normalized to midnight.
    Use ``SqlDate.calendar_date`` for the date-only view.
    """
    return None if instant is None else SqlDate(epoch_ms=instant.epoch_ms)


def from_timestamp_storage(value: SqlTimestamp | None) -> Instant | None:
    return None if value is None else value.to_instant()


def from_date_storage(value: SqlDate | None) -> Instant | None:
    return None if value is None else value.to_instant()


def from_storage(value: StorageValue | None) -> Instant | None:
    """Inverse of either wrapping, whichever storage type *value* is."""
    return None if value is None else value.to_instant()
