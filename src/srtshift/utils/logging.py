"""structlog configuration shared by the API and the CLI."""

import logging
import sys
from typing import TextIO

import structlog

from srtshift.utils.config import get_settings


def setup_logging(stream: TextIO | None = None) -> None:
    """Configure structlog from settings.

    Args:
        stream: Where log lines are written, defaults to stdout
    """
    settings = get_settings()
    level = logging.getLevelNamesMapping().get(
        settings.log_level.upper(), logging.INFO
    )

    renderer: structlog.types.Processor
    if settings.log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stdout),
        cache_logger_on_first_use=False,
    )
