"""dateconv — date formatting, parsing, arithmetic, and SQL storage conversion."""

from dateconv.converters.arithmetic import add_duration
from dateconv.converters.formatting import (
    format_default,
    format_instant,
    format_primary,
    format_primary_display,
    format_secondary,
    format_secondary_display,
    parse_instant,
    parse_primary,
)
from dateconv.converters.storage import (
    from_date_storage,
    from_storage,
    from_timestamp_storage,
    to_date_storage,
    to_timestamp_storage,
)
from dateconv.domain.errors import FormatMismatchError, InstantOverflowError
from dateconv.domain.instant import Instant
from dateconv.domain.layouts import Layout
from dateconv.domain.storage import SqlDate, SqlTimestamp

__version__ = "0.1.0"

__all__ = [
    "FormatMismatchError",
    "Instant",
    "InstantOverflowError",
    "Layout",
    "SqlDate",
    "SqlTimestamp",
    "__version__",
    "add_duration",
    "format_default",
    "format_instant",
    "format_primary",
    "format_primary_display",
    "format_secondary",
    "format_secondary_display",
    "from_date_storage",
    "from_storage",
    "from_timestamp_storage",
    "parse_instant",
    "parse_primary",
    "to_date_storage",
    "to_timestamp_storage",
]
