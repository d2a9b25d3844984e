"""structlog setup for chart services.

Every chart request binds its pair and period into structlog contextvars,
so log lines from concurrent requests stay attributable without passing a
logger around.
"""

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager

import structlog


def _select_renderer(log_format: str | None) -> structlog.types.Processor:
    """JSON for log shipping, console (the default) for local runs."""
    chosen = (log_format or os.environ.get("LOG_FORMAT", "console")).lower()
    if chosen == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(log_level: str = "INFO", log_format: str | None = None) -> None:
    """Route structlog through stdlib logging with a single root handler.

    Args:
        log_level: Root level name; unknown names fall back to INFO.
        log_format: "json" or "console". None reads LOG_FORMAT from the
            environment.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _select_renderer(log_format),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


@contextmanager
def chart_log_context(**context: object) -> Iterator[None]:
    """Bind chart request fields (pair, period) for the enclosed block."""
    with structlog.contextvars.bound_contextvars(**context):
        yield


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger with the given name."""
    return structlog.get_logger(name)
