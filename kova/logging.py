"""Structured Logging for Kova

structlog-based logging for the engine and the applications embedding it:
- Colored console output while developing, JSON lines in production
- Library loggers namespaced under ``kova.`` on the stdlib hierarchy
- A LogEntry sink that forwards constraint evaluations to structlog

Usage:
    from kova.config import ValidationConfig
    from kova.logging import configure_logging, structlog_sink

    configure_logging(level="DEBUG")
    config = ValidationConfig(logger=structlog_sink())
"""
import logging
import sys
from typing import Callable, TextIO

import structlog
from structlog.types import EventDict, Processor

from kova.validation.log import LogEntry, Satisfied

ROOT_LOGGER = "kova"
MAX_REPR = 200

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def _add_library_info(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor tagging every event with the emitting library."""
    event_dict.setdefault("library", ROOT_LOGGER)
    return event_dict


def _stringify_inputs(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor that renders validated inputs as bounded reprs."""
    for key in ("input", "args"):
        value = event_dict.get(key)
        if isinstance(value, (str, int, float, bool, type(None))): continue
        text = repr(value)
        event_dict[key] = text if len(text) <= MAX_REPR else f"{text[:MAX_REPR - 3]}..."
    return event_dict


def get_shared_processors() -> list[Processor]:
    """Processors applied to both structlog and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _add_library_info,
        _stringify_inputs,
    ]


def _renderer(json_logs: bool) -> Processor:
    if json_logs: return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True, exception_formatter=structlog.dev.plain_traceback)


def configure_logging(level: str = "INFO", json_logs: bool = False, stream: TextIO | None = None) -> None:
    """Route kova's loggers through structlog.

    Args:
        level: Threshold for the ``kova`` logger (DEBUG, INFO, WARNING, ...)
        json_logs: JSON lines if True, colored console output otherwise
        stream: Destination, stderr by default
    """
    shared = get_shared_processors()
    structlog.configure(
        processors=[*shared, structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, _renderer(json_logs)],
    ))

    root = logging.getLogger(ROOT_LOGGER)
    root.handlers = [handler]
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.propagate = False


def configure_from_settings() -> None:
    """Configure logging from ``KOVA_LOG_LEVEL`` / ``KOVA_LOG_JSON``."""
    from kova.config import get_settings
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


def get_logger(name: str = ROOT_LOGGER) -> structlog.stdlib.BoundLogger:
    """structlog logger backed by the stdlib logger ``name``.

    Events go through the stdlib hierarchy, so they stay silent until
    ``configure_logging`` (or the host application) attaches a handler.
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)


class LoggerRegistry:
    """One cached logger per library domain, named ``kova.<domain>``."""

    _loggers: dict[str, structlog.stdlib.BoundLogger] = {}

    @classmethod
    def get(cls, domain: str) -> structlog.stdlib.BoundLogger:
        if (logger := cls._loggers.get(domain)) is None:
            logger = cls._loggers[domain] = get_logger(f"{ROOT_LOGGER}.{domain}")
        return logger


def validation_logger() -> structlog.stdlib.BoundLogger: return LoggerRegistry.get("validation")


def resources_logger() -> structlog.stdlib.BoundLogger: return LoggerRegistry.get("resources")


def structlog_sink(logger=None) -> Callable[[LogEntry], None]:
    """Build a ``ValidationConfig.logger`` that forwards entries to structlog.

    Satisfied entries are logged at debug, Violated entries at info.
    """
    log = logger or validation_logger()

    def sink(entry: LogEntry) -> None:
        fields = {"constraint_id": entry.constraint_id, "root": entry.root, "path": entry.path, "input": entry.input}
        if isinstance(entry, Satisfied):
            log.debug("constraint.satisfied", **fields)
        else:
            log.info("constraint.violated", args=list(entry.args), **fields)

    return sink
