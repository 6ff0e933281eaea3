"""Structured logging for typegate.

The library emits DEBUG events only, and only when ``TYPEGATE_TRACE`` is
set. Applications that want to see them call ``configure_logging``.
"""
import logging
import sys
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version

import structlog
from structlog.types import EventDict, Processor


@lru_cache
def _library_version() -> str:
    try:
        return version("typegate")
    except PackageNotFoundError:
        return "0.0.0"


def _add_library_info(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    event_dict.setdefault("library", "typegate")
    event_dict.setdefault("version", _library_version())
    return event_dict


def _processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        _add_library_info,
    ]


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Route typegate's structlog events through the stdlib root logger.

    Args:
        level: Log level name. Defaults to ``Settings.LOG_LEVEL``.
        json_logs: JSON lines if True, colored console if False. Defaults to ``Settings.LOG_JSON``.
    """
    from .config import get_settings

    settings = get_settings()
    level = level or settings.LOG_LEVEL
    json_logs = settings.LOG_JSON if json_logs is None else json_logs

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    processors = _processors()

    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=processors,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    ))
    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def validation_logger() -> structlog.stdlib.BoundLogger:
    """Logger for validator construction and alternation tracing."""
    return get_logger("typegate.validation")
