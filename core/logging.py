"""
Structured logging for the storefront.

Every module logs through ``get_logger(__name__)`` and passes event data as
keyword arguments, e.g. ``logger.info("Cart updated", user_id=..., size=3)``.
Request handling and scheduler jobs bind their own context (request id,
job key) so log lines can be correlated without threading ids around.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from collections.abc import Iterator

    from structlog.typing import Processor

    from core.config import LoggingSettings

# APScheduler logs every job submission at INFO.
NOISY_LOGGERS = ("apscheduler.scheduler", "apscheduler.executors.default")


def _renderer(json_format: bool) -> list[Processor]:
    if json_format:
        return [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    return [
        structlog.dev.ConsoleRenderer(
            colors=sys.stdout.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        )
    ]


def configure_logging(
    *,
    json_format: bool = False,
    log_level: str = "INFO",
) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        json_format: Render JSON lines instead of the console format.
        log_level: Minimum level name, case-insensitive.
    """
    level = logging.getLevelName(log_level.upper())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            *_renderer(json_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    if level > logging.DEBUG:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def configure_from_settings(settings: LoggingSettings) -> None:
    """Configure logging from the ``LOG_*`` settings section."""
    configure_logging(json_format=settings.json_format, log_level=settings.level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, usually for ``__name__``."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger


def bind_context(**kwargs: object) -> None:
    """
    Bind key-value pairs to every log line of the current context.

    The request middleware binds the request id, path and method here.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all context variables."""
    structlog.contextvars.clear_contextvars()


@contextmanager
def job_context(job: str, **kwargs: object) -> Iterator[None]:
    """Bind ``job`` and extra keys for the duration of a scheduled run."""
    with structlog.contextvars.bound_contextvars(job=job, **kwargs):
        yield
