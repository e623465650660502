"""Error types raised by dateconv operations.

Both subclass the matching builtin so callers catching ``ValueError`` or
``OverflowError`` keep working.
"""

from __future__ import annotations


class FormatMismatchError(ValueError):
    """Text does not conform to the layout it was parsed with."""

    def __init__(self, text: str, layout: str, pattern: str) -> None:
        # All three go to ``args`` so the error pickles across processes.
        super().__init__(text, layout, pattern)
        self.text = text
        self.layout = layout
        self.pattern = pattern

    def __str__(self) -> str:
        return f"Unparseable date: {self.text!r}. Expected {self.pattern}"


class InstantOverflowError(OverflowError):
    """A millisecond value left the range an instant can hold."""
