"""structlog setup shared by the presenter package.

The library never configures logging on import; applications call
``configure_logging`` once at startup (tests may skip it entirely, in which
case structlog's defaults apply).
"""

import logging
import sys

import structlog

from presenter.core.config import get_settings


def configure_logging(debug: bool | None = None) -> None:
    if debug is None:
        debug = get_settings().debug
    log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )
    renderer = structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None, **initial_values) -> structlog.BoundLogger:
    """Return a structlog logger, optionally pre-bound with context values."""
    return structlog.get_logger(name, **initial_values)
