"""Render instants as calendar-date text and parse text back.

Only the calendar date is represented: parsing yields midnight UTC, so
``parse_primary(format_primary(t)) == t.start_of_day()``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dateconv.domain.errors import FormatMismatchError
from dateconv.domain.instant import Instant
from dateconv.domain.layouts import LAYOUT_PATTERNS, Layout, match_date, render_date

if TYPE_CHECKING:
    from dateconv.config.settings import DateconvSettings

logger = logging.getLogger(__name__)


def format_instant(instant: Instant, layout: Layout) -> str:
    """Render the UTC calendar date of *instant* under *layout*.

    Raises:
        InstantOverflowError: If *instant* falls outside years 1..9999.
    """
    return render_date(instant.to_datetime().date(), layout)


def format_primary(instant: Instant) -> str:
    """``YYYY-MM-DD``."""
    return format_instant(instant, Layout.PRIMARY)


def format_primary_display(instant: Instant) -> str:
    """``YYYY/MM/DD``."""
    return format_instant(instant, Layout.PRIMARY_DISPLAY)


def format_secondary(instant: Instant) -> str:
    """``DD-MM-YYYY``."""
    return format_instant(instant, Layout.SECONDARY)


def format_secondary_display(instant: Instant) -> str:
    """``DD/MM/YYYY``."""
    return format_instant(instant, Layout.SECONDARY_DISPLAY)


def format_default(instant: Instant, settings: DateconvSettings | None = None) -> str:
    """Render *instant* under the configured default layout."""
    if settings is None:
        from dateconv.config.settings import DateconvSettings

        settings = DateconvSettings.load()
    return format_instant(instant, settings.default_layout)


def parse_instant(text: str, layout: Layout) -> Instant:
    """Parse *text* under *layout* into the instant at midnight UTC.

    Args:
        text: Date text, e.g. ``"2023-03-15"`` for the primary layout.
        layout: Layout the text must conform to.

    Raises:
        FormatMismatchError: If *text* has the wrong shape or names an
            impossible calendar date.
    """
    parsed = match_date(text, layout)
    if parsed is None:
        raise FormatMismatchError(text, layout, LAYOUT_PATTERNS[layout])
    logger.debug("Parsed %r under %s layout", text, layout)
    return Instant.from_date(parsed)


def parse_primary(text: str) -> Instant:
    """Parse ``YYYY-MM-DD`` text."""
    return parse_instant(text, Layout.PRIMARY)
