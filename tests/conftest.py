"""Shared pytest fixtures for dateconv tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from dateconv.domain.instant import Instant

# 2023-03-15T00:00:00.000Z
MARCH_15_MS = 1678838400000


@pytest.fixture
def march_15() -> Instant:
    """Midnight UTC on 2023-03-15."""
    return Instant(epoch_ms=MARCH_15_MS)


@pytest.fixture
def afternoon() -> Instant:
    """2023-03-15T14:30:15.250Z — same day as ``march_15`` with a time of day."""
    return Instant(epoch_ms=MARCH_15_MS + 52_215_250)


@pytest.fixture
def db_engine() -> Iterator[Engine]:
    """In-memory SQLite engine."""
    engine = create_engine("sqlite://", echo=False)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host ``DATECONV_*`` variables out of settings tests."""
    for var in ("DATECONV_DEFAULT_LAYOUT", "DATECONV_VERBOSE", "DATECONV_LOG_JSON"):
        monkeypatch.delenv(var, raising=False)
