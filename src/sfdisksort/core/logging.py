"""
sfdisksort structured logging.

structlog events are routed through the standard logging module once
setup_logging has run. Output goes to stderr or a log file and never to
stdout, so the sorted dump can be piped straight back into sfdisk.
"""

from __future__ import annotations

import logging
import sys
import time
from datetime import datetime
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

if TYPE_CHECKING:
    from sfdisksort.core.config import LoggingConfig


_configured = False


def stamp_event(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add the ISO timestamp and upper-case level to a log event."""
    event_dict["timestamp"] = datetime.now().isoformat()
    event_dict["level"] = method_name.upper()
    return event_dict


def use_stderr_defaults() -> None:
    """
    Print warnings and errors to stderr until setup_logging runs.

    Unconfigured structlog writes to stdout, which would corrupt the dump
    when sort_dump is used as a library.
    """
    if _configured or structlog.is_configured():
        return
    structlog.configure(
        processors=[stamp_event, structlog.dev.ConsoleRenderer(colors=False)],
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=False,
    )


def _handlers(config: LoggingConfig) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []

    if config.console_enabled:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(getattr(logging, config.level))
        handlers.append(stderr_handler)

    if config.file_enabled:
        config.log_directory.mkdir(parents=True, exist_ok=True)
        log_file = config.log_directory / f"sfdisksort_{datetime.now():%Y%m%d}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        handlers.append(file_handler)

    # Without a handler the logging module falls back to printing warnings
    return handlers or [logging.NullHandler()]


def _renderers(config: LoggingConfig) -> list[Processor]:
    if config.json_format:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def setup_logging(config: LoggingConfig) -> None:
    """Configure structured logging for sfdisksort. Later calls are no-ops."""
    global _configured

    if _configured:
        return

    logging.basicConfig(level=logging.DEBUG, handlers=_handlers(config), format="%(message)s")

    structlog.configure(
        processors=[
            structlog.stdlib.add_logger_name,
            stamp_event,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            *_renderers(config),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _configured = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    use_stderr_defaults()
    return structlog.get_logger(name or "sfdisksort")


class OperationLogger:
    """
    Context manager that logs the start, outcome and duration of an operation.

    Fields passed to the constructor or to update() are attached to the
    completion (or failure) event.
    """

    def __init__(
        self,
        operation: str,
        logger: structlog.stdlib.BoundLogger | None = None,
        **fields: Any,
    ):
        self.operation = operation
        self.logger = logger or get_logger()
        self.fields = fields
        self._started: float | None = None

    def __enter__(self) -> OperationLogger:
        self._started = time.perf_counter()
        self.logger.debug(f"Starting {self.operation}", operation=self.operation, **self.fields)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        elapsed = time.perf_counter() - self._started if self._started is not None else 0.0
        fields = dict(self.fields, operation=self.operation, duration_seconds=round(elapsed, 6))

        if exc_type is None:
            self.logger.info(f"Completed {self.operation}", **fields)
        else:
            self.logger.error(
                f"Failed {self.operation}",
                error_type=exc_type.__name__,
                error=str(exc_val),
                **fields,
            )

    def update(self, **fields: Any) -> None:
        """Attach more fields to the completion event."""
        self.fields.update(fields)
