"""Structured logging on stderr, so CLI output on stdout stays machine-readable."""

import logging
import sys

import structlog
from structlog.typing import EventDict, Processor

from alerthook.core.config import get_settings

settings = get_settings()

# third-party loggers that would otherwise log every request at INFO
QUIET_LOGGERS = ("httpx", "httpcore")


def add_app_context(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    """Tag entries with the application name and environment."""
    event_dict.setdefault("app", settings.app_name)
    event_dict.setdefault("env", settings.app_env)
    return event_dict


def build_renderers() -> list[Processor]:
    """Colored console output in debug or with ``LOG_FORMAT=console``, JSON otherwise."""
    if settings.debug or settings.log_format == "console":
        return [structlog.dev.ConsoleRenderer(colors=settings.debug)]
    return [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]


def setup_logging() -> None:
    """Configure structlog over stdlib logging, writing to stderr."""
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        *build_renderers(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


setup_logging()
