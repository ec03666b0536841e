"""Structured logging utilities.

Provides consistent logging configuration across lazyframe using structlog.

lazyframe is a library, so it never configures logging on its own.
Loggers are bound to the standard library ``lazyframe`` logger,
which means that by default only warnings and errors are reported.
Applications that want to see the events emitted while pipelines
are evaluated can invoke :func:`configure_logging`::

    from lazyframe.utils.logging import configure_logging
    configure_logging("DEBUG")
"""

import logging
import os
import sys

import structlog

LOG_LEVEL_ENV = "LAZYFRAME_LOG_LEVEL"
ROOT_LOGGER = "lazyframe"


def configure_logging(level: str | None = None, json_format: bool = False) -> None:
    """Configure structured logging for lazyframe.

    Installs a handler on the ``lazyframe`` logger that
    renders the structured events on standard output.

    :param level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
                  Defaults to the ``LAZYFRAME_LOG_LEVEL`` env var, or WARNING.
    :param json_format: Emit JSON lines instead of the console format.
    """
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "WARNING")
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown logging level: {level}")

    if json_format:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers = [handler]
    logger.setLevel(numeric_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Events below the level of the standard library logger
    are discarded before being rendered.

    :param name: Logger name (typically __name__)
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
