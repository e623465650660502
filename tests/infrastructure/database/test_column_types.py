"""Tests for the SQLAlchemy storage column types."""

from datetime import date, datetime

import pytest
from sqlalchemy import Column, Integer, MetaData, Table, insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import StatementError

from dateconv.converters.storage import to_date_storage, to_timestamp_storage
from dateconv.domain.instant import Instant
from dateconv.domain.storage import SqlDate, SqlTimestamp
from dateconv.infrastructure.database import DateColumn, TimestampColumn

metadata = MetaData()

events = Table(
    "events",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("happened_at", TimestampColumn),
    Column("happened_on", DateColumn),
)


@pytest.fixture
def engine(db_engine: Engine) -> Engine:
    metadata.create_all(db_engine)
    return db_engine


def _insert_and_load(engine: Engine, **values: object) -> tuple[object, object]:
    with engine.begin() as conn:
        conn.execute(insert(events).values(**values))
        row = conn.execute(select(events.c.happened_at, events.c.happened_on)).one()
    return row.happened_at, row.happened_on


class TestTimestampColumn:
    def test_round_trip_keeps_milliseconds(self, engine: Engine, afternoon: Instant) -> None:
        stored, _ = _insert_and_load(engine, happened_at=to_timestamp_storage(afternoon))
        assert stored == SqlTimestamp(epoch_ms=afternoon.epoch_ms)

    def test_none_passes_through(self, engine: Engine) -> None:
        stored, _ = _insert_and_load(engine, happened_at=None)
        assert stored is None

    def test_rejects_other_types(self, engine: Engine, afternoon: Instant) -> None:
        with pytest.raises(StatementError) as exc_info:
            _insert_and_load(engine, happened_at=afternoon)
        assert isinstance(exc_info.value.orig, TypeError)


class TestDateColumn:
    def test_column_drops_time_of_day(
        self, engine: Engine, afternoon: Instant, march_15: Instant
    ) -> None:
        _, stored = _insert_and_load(engine, happened_on=to_date_storage(afternoon))
        assert stored == SqlDate(epoch_ms=march_15.epoch_ms)
        assert stored.calendar_date == date(2023, 3, 15)

    def test_none_passes_through(self, engine: Engine) -> None:
        _, stored = _insert_and_load(engine, happened_on=None)
        assert stored is None

    def test_rejects_timestamp(self, engine: Engine, afternoon: Instant) -> None:
        with pytest.raises(StatementError) as exc_info:
            _insert_and_load(engine, happened_on=to_timestamp_storage(afternoon))
        assert isinstance(exc_info.value.orig, TypeError)

    def test_type_cache_ok(self) -> None:
        assert DateColumn.cache_ok is True
        assert TimestampColumn.cache_ok is True

    def test_driver_datetime_result_loads_as_midnight(self, engine: Engine) -> None:
        value = DateColumn().process_result_value(datetime(2023, 3, 15, 9, 45), engine.dialect)
        assert value == SqlDate.from_date(date(2023, 3, 15))
