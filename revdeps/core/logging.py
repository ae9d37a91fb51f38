"""Structured logging for the CLI: structlog rendered through stdlib handlers."""

from __future__ import annotations

import logging
import logging.config
import os

import structlog

DEFAULT_LEVEL = "WARNING"

# Third-party loggers that are noisy at INFO/DEBUG.
_QUIET_LOGGERS = ("httpx", "httpcore")


def resolve_level(level: str | None = None) -> tuple[str, bool]:
    """Return ``(level_name, valid)`` for *level* or ``REVDEPS_LOG_LEVEL``.

    Unknown names resolve to ``DEFAULT_LEVEL`` with ``valid`` False.
    """
    name = (level or os.environ.get("REVDEPS_LOG_LEVEL") or DEFAULT_LEVEL).strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name, True
    return DEFAULT_LEVEL, False


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(level: str | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Output goes to stderr so that ``--json`` results on stdout stay parseable.

    Environment:
        REVDEPS_LOG_LEVEL  — used when *level* is not given (default: WARNING)
        REVDEPS_LOG_FORMAT — console | json (default: console)
    """
    log_level, valid = resolve_level(level)
    log_format = os.environ.get("REVDEPS_LOG_FORMAT", "console").lower()

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    loggers: dict[str, dict[str, str]] = {"revdeps": {"level": log_level}}
    loggers.update({name: {"level": "WARNING"} for name in _QUIET_LOGGERS})

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structlog": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": pre_chain,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        _renderer(log_format),
                    ],
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "structlog",
                },
            },
            "root": {"handlers": ["stderr"], "level": log_level},
            "loggers": loggers,
        }
    )

    if not valid:
        structlog.get_logger("revdeps.logging").warning(
            "logging.invalid_level",
            requested=level or os.environ.get("REVDEPS_LOG_LEVEL"),
            using=DEFAULT_LEVEL,
        )
