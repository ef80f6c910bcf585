"""Logging setup: stdlib logging plus structlog processors."""

import logging
from typing import Optional

import structlog

from infrastructure.config import Settings, load_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure stdlib logging and structlog from settings.

    Stdlib loggers (event bus) and structlog loggers (domain/application)
    share the same level. Console output is human-readable; ``json``
    renders one JSON object per line.

    Args:
        settings: Settings to apply (loaded from environment if omitted)
    """
    settings = settings or load_settings()
    level = getattr(logging, settings.log_level, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )

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
        cache_logger_on_first_use=False,
    )
