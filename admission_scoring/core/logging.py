"""
Logging setup - Admission Scoring
admission_scoring/core/logging.py

Routes structlog events through the standard library so that CLI and
library callers share one handler configuration.
"""

import logging
import sys
from typing import Optional

import structlog

from admission_scoring.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog rendering and level from settings."""
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL)

    if settings.LOG_FORMAT == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
