"""Structured logging configuration for Word Counter.

All output, including uvicorn's own loggers, goes through one stdout handler
on the root logger. Every event carries the service name and version, plus
the request correlation ID while a request is being handled.
"""

import logging
import sys

import structlog
from rich.console import Console
from rich.json import JSON

from .config import WordCounterSettings, settings as default_settings
from .version import __version__

SERVICE_NAME = "word-counter"

# Loggers created by uvicorn that should share our handler
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class RichJSONRenderer:
    """Render an event as syntax-highlighted JSON using Rich."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(force_terminal=True)

    def __call__(self, logger, method_name, event_dict) -> str:
        with self.console.capture() as capture:
            self.console.print(JSON.from_data(event_dict, default=str))
        return capture.get().rstrip("\n")


def add_service_info(logger, method_name, event_dict):
    """Tag events with the service name and version."""
    event_dict.setdefault("service", SERVICE_NAME)
    event_dict.setdefault("version", __version__)
    return event_dict


def _renderer(log_format: str):
    if log_format == "json":
        return [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    if log_format == "rich_json":
        return [structlog.processors.format_exc_info, RichJSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=True)]


def configure_logging(
    settings: WordCounterSettings | None = None,
) -> structlog.stdlib.BoundLogger:
    """Configure structlog and the root logger from settings.

    Safe to call more than once; each call replaces the previous setup.

    Args:
        settings: Settings to use, defaults to the global settings

    Returns:
        Logger for the word_counter package
    """
    settings = settings or default_settings
    level = getattr(logging, settings.log_level)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(logging.StreamHandler(sys.stdout))
    root_logger.setLevel(level)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            add_service_info,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            *_renderer(settings.log_format),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # create_app() may reconfigure; module-level loggers must follow
        cache_logger_on_first_use=False,
    )

    return structlog.get_logger("word_counter")


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for the given name."""
    return structlog.get_logger(name)
