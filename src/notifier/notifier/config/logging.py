# ABOUTME: Loguru wiring for notifier log records
# ABOUTME: Provides name-bound loggers and a single-sink setup driven by notifier settings

import sys
from typing import Any, Callable, Optional, TextIO, Union

from loguru import logger

from notifier.config._base import BaseNotifierSettings

TEXT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> | "
    "<level>{message}</level>"
)

Sink = Union[TextIO, Callable[[Any], None]]


def get_logger(name: str):
    """Return the loguru logger bound to ``name`` (typically ``__name__``)."""
    return logger.bind(name=name)


def setup_logging(settings: Optional[BaseNotifierSettings] = None, sink: Sink = sys.stderr) -> int:
    """
    Route notifier log records to one sink.

    Delivery code only emits records; a host process that wants them formatted
    calls this once at startup. ``LOG_LEVEL`` sets the threshold, ``LOG_FORMAT``
    selects colored text or one JSON object per line, and ``DEBUG`` turns on
    loguru's variable diagnostics in tracebacks.

    Args:
        settings: Settings to read. Defaults to a fresh ``BaseNotifierSettings``.
        sink: Stream or callable receiving formatted records.

    Returns:
        The loguru handler id, usable with ``logger.remove``.
    """
    settings = settings or BaseNotifierSettings()
    structured = settings.LOG_FORMAT == "json"

    logger.remove()
    logger.configure(extra={"name": settings.APP_NAME})
    return logger.add(
        sink,
        level=settings.LOG_LEVEL,
        format="{message}" if structured else TEXT_FORMAT,
        serialize=structured,
        colorize=False if structured else None,
        backtrace=settings.DEBUG,
        diagnose=settings.DEBUG,
    )
