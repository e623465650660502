"""structlog configuration for dateconv.

Two output modes:
- Human (default): colored console output to stderr
- JSON (log_json): Structured JSON lines to stderr

Only the ``dateconv`` logger is touched. The host application's root
logger, its other loggers, and the global structlog configuration stay
as the application set them. Library modules log through stdlib
``logging.getLogger(__name__)``; :func:`get_logger` gives a structlog
logger whose events render through the same handler.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from dateconv.config.settings import DateconvSettings

LOGGER_NAME = "dateconv"

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


class _DateconvHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Marker type so reconfiguring replaces only our own handler."""


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route ``dateconv`` log records to stderr.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = _DateconvHandler(sys.stderr)
    handler.setFormatter(formatter)

    pkg_logger = logging.getLogger(LOGGER_NAME)
    for existing in [h for h in pkg_logger.handlers if isinstance(h, _DateconvHandler)]:
        pkg_logger.removeHandler(existing)
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    pkg_logger.propagate = False


def configure_logging_from_settings(settings: DateconvSettings) -> None:
    """Apply the logging switches carried by *settings*."""
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)


def get_logger(name: str = LOGGER_NAME, **initial_values: Any) -> structlog.stdlib.BoundLogger:
    """structlog logger bound to the stdlib logger *name*.

    Wrapped locally rather than through ``structlog.configure`` so the
    application's own structlog setup is left alone.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        **initial_values,
    )
