"""Fixed calendar-date layouts.

Each layout is a field order plus a separator. Rendering zero-pads every
field (four-digit year). Matching is strict: the text must have exactly
the layout's shape and name a real calendar date.
"""

from __future__ import annotations

import re
from datetime import date
from enum import StrEnum


class Layout(StrEnum):
    """The four supported date layouts."""

    PRIMARY = "primary"
    PRIMARY_DISPLAY = "primary_display"
    SECONDARY = "secondary"
    SECONDARY_DISPLAY = "secondary_display"


_YMD = ("year", "month", "day")
_DMY = ("day", "month", "year")

FIELD_ORDERS: dict[Layout, tuple[str, str, str]] = {
    Layout.PRIMARY: _YMD,
    Layout.PRIMARY_DISPLAY: _YMD,
    Layout.SECONDARY: _DMY,
    Layout.SECONDARY_DISPLAY: _DMY,
}

SEPARATORS: dict[Layout, str] = {
    Layout.PRIMARY: "-",
    Layout.PRIMARY_DISPLAY: "/",
    Layout.SECONDARY: "-",
    Layout.SECONDARY_DISPLAY: "/",
}

# Human-readable patterns, used in error messages.
LAYOUT_PATTERNS: dict[Layout, str] = {
    Layout.PRIMARY: "yyyy-MM-dd",
    Layout.PRIMARY_DISPLAY: "yyyy/MM/dd",
    Layout.SECONDARY: "dd-MM-yyyy",
    Layout.SECONDARY_DISPLAY: "dd/MM/yyyy",
}

_FIELD_WIDTHS = {"year": 4, "month": 2, "day": 2}


def _compile(layout: Layout) -> re.Pattern[str]:
    groups = [rf"(?P<{name}>\d{{{_FIELD_WIDTHS[name]}}})" for name in FIELD_ORDERS[layout]]
    return re.compile(re.escape(SEPARATORS[layout]).join(groups), re.ASCII)


LAYOUT_REGEXES: dict[Layout, re.Pattern[str]] = {layout: _compile(layout) for layout in Layout}


def render_date(d: date, layout: Layout) -> str:
    """Render *d* under *layout*."""
    fields = {"year": f"{d.year:04d}", "month": f"{d.month:02d}", "day": f"{d.day:02d}"}
    return SEPARATORS[layout].join(fields[name] for name in FIELD_ORDERS[layout])


def match_date(text: str, layout: Layout) -> date | None:
    """Return the calendar date *text* names under *layout*, or None.

    None covers both a shape mismatch and an impossible date such as
    ``2023-02-30``.
    """
    m = LAYOUT_REGEXES[layout].fullmatch(text)
    if m is None:
        return None
    try:
        return date(int(m["year"]), int(m["month"]), int(m["day"]))
    except ValueError:
        return None
