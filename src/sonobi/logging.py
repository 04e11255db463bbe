"""
Structured logging for the Sonobi adapter.

Log entries are rendered as JSON by default. ``LOG_LEVEL`` and
``LOG_FORMAT`` ('json' or 'console') override the defaults.
"""

import logging
import os
import sys
from typing import Any

import structlog

SERVICE_NAME = "sonobi-adapter"


def add_service_info(
    logger: structlog.typing.WrappedLogger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Tag every entry with the adapter's service name."""
    event_dict["service"] = SERVICE_NAME
    return event_dict


def configure_logging(level: str = "INFO", format: str = "json") -> None:
    """
    Configure structlog on top of the standard library logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format: Output format ('json' or 'console')
    """
    level = os.getenv("LOG_LEVEL", level).upper()
    format = os.getenv("LOG_FORMAT", format).lower()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level, logging.INFO),
    )

    if format == "console":
        renderer: structlog.typing.Processor = structlog.dev.ConsoleRenderer(
            colors=sys.stdout.isatty()
        )
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.contextvars.merge_contextvars,
            add_service_info,
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def adapter_logger(bidder_code: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound to one bidder adapter."""
    return structlog.get_logger("sonobi.adapter").bind(bidder=bidder_code)


configure_logging()
