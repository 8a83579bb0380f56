"""Library-safe structured logging for the luxor package.

Every luxor logger is a structlog BoundLogger wrapped around a stdlib logger
under the ``luxor`` namespace. That namespace carries a NullHandler, so a
program that imports the client and never configures logging sees nothing
on stdout or stderr. Applications (and the ``luxor-pool`` CLI) opt in with
``setup_logging``, which routes events through the root handler.
"""

import logging
import os
from typing import Literal

import structlog

LOGGER_NAMESPACE = "luxor"

LogFormat = Literal["console", "json"]

logging.getLogger(LOGGER_NAMESPACE).addHandler(logging.NullHandler())


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(log_level: str = "INFO", log_format: LogFormat | None = None) -> None:
    """Route luxor (and any other structlog) events to stderr.

    Args:
        log_level: Root level name; unknown names fall back to INFO.
        log_format: "json" or "console". Falls back to the LOG_FORMAT
            environment variable, then "console".
    """
    fmt = (log_format or os.environ.get("LOG_FORMAT", "console")).lower()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()  # stderr; stdout is reserved for CLI output
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(fmt),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # httpx logs every request at INFO
    if root_logger.level > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger backed by the stdlib logger ``name``.

    Until ``setup_logging`` runs, events end at the namespace NullHandler.
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )
