"""Duration units expressed in milliseconds.

Arithmetic is purely linear: a day is always 24 hours, with no
daylight-saving or calendar adjustment.
"""

from __future__ import annotations

SECOND = 1000
MINUTE = SECOND * 60
HOUR = MINUTE * 60
DAY = HOUR * 24

# Signed 64-bit bounds for epoch milliseconds.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def to_milliseconds(
    days: int = 0,
    hours: int = 0,
    minutes: int = 0,
    seconds: int = 0,
    milliseconds: int = 0,
) -> int:
    """Collapse signed duration components into a millisecond count."""
    return milliseconds + seconds * SECOND + minutes * MINUTE + hours * HOUR + days * DAY


def in_range(value: int) -> bool:
    """Whether *value* fits a signed 64-bit integer."""
    return INT64_MIN <= value <= INT64_MAX
