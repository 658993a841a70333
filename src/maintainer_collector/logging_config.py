"""Structured logging setup.

Usage:
    >>> from maintainer_collector.logging_config import configure_logging, get_logger
    >>> configure_logging(level="DEBUG")
    >>> logger = get_logger(__name__)
    >>> logger.info("maintainers_file_merged", project="cli", people=12)
"""

import logging
import sys
from typing import Optional

import structlog

from maintainer_collector.config import VALID_LOG_FORMATS, VALID_LOG_LEVELS, get_settings


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Log level name. Defaults to ``Settings.log_level``.
        fmt: ``"console"`` or ``"json"``. Defaults to ``Settings.log_format``.

    Raises:
        ValueError: If ``level`` or ``fmt`` is not a recognized name
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    fmt = (fmt or settings.log_format).lower()
    if level_name not in VALID_LOG_LEVELS:
        raise ValueError(f"log level must be one of {sorted(VALID_LOG_LEVELS)}, got {level!r}")
    if fmt not in VALID_LOG_FORMATS:
        raise ValueError(f"log format must be one of {sorted(VALID_LOG_FORMATS)}, got {fmt!r}")
    numeric_level = logging.getLevelName(level_name)

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=numeric_level, force=True)

    processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if fmt == "json":
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: Optional[str] = None) -> structlog.typing.FilteringBoundLogger:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
