"""Structured logging setup.

Configures structlog on top of the standard library logger so that
request-scoped context (request_id) bound in middleware shows up on
every log line.
"""

import logging

import structlog

from coolstff.infrastructure.config import settings


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Configure structlog and the root logger.

    Args:
        level: Log level name; defaults to settings.log_level.
        json_logs: Render JSON lines; defaults to the opposite of settings.debug.
    """
    level = (level or settings.log_level).upper()
    if json_logs is None:
        json_logs = not settings.debug

    logging.basicConfig(format="%(message)s", level=level)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
