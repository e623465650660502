"""Linear duration arithmetic on instants."""

from __future__ import annotations

import logging

from dateconv.domain.durations import in_range, to_milliseconds
from dateconv.domain.errors import InstantOverflowError
from dateconv.domain.instant import Instant

logger = logging.getLogger(__name__)


def add_duration(
    instant: Instant,
    days: int = 0,
    hours: int = 0,
    minutes: int = 0,
    seconds: int = 0,
    milliseconds: int = 0,
) -> Instant:
    """Add a signed duration to *instant*.

    Each component may be negative. No calendar adjustment happens: one
    day is exactly 86,400,000 ms.

    Raises:
        InstantOverflowError: If the result leaves the signed 64-bit range.
    """
    delta = to_milliseconds(days, hours, minutes, seconds, milliseconds)
    result = instant.epoch_ms + delta
    if not in_range(result):
        msg = f"Adding {delta} ms to {instant.epoch_ms} overflows the instant range"
        raise InstantOverflowError(msg)
    logger.debug("Shifted instant %d by %d ms", instant.epoch_ms, delta)
    return Instant(epoch_ms=result)
