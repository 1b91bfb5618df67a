"""Logging setup for hosts embedding rolecalc.

Format and level come from :class:`rolecalc.config.Settings`
(``ROLECALC_LOG_FORMAT`` and ``ROLECALC_LOG_LEVEL``). In ``json`` mode every
line is one JSON object, and the engine's record extras (the role being
closed, generation count, closure and cache sizes) become top-level keys.
"""

from __future__ import annotations

import logging
import traceback

from rolecalc.config import Settings, get_settings

#: Extras the engine attaches to its records.
ENGINE_FIELDS = ("role", "required", "generations", "closure_size", "cache_size")

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class StructuredJsonFormatter(logging.Formatter):
    """JSON lines via ``pythonjsonlogger``, with tracebacks kept as a list."""

    def __init__(self) -> None:
        super().__init__()
        from pythonjsonlogger.json import JsonFormatter

        self._inner = JsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003
        payload = {
            key: getattr(record, key)
            for key in ENGINE_FIELDS
            if getattr(record, key, None) is not None
        }
        if record.exc_info and record.exc_info[1] is not None:
            payload["traceback"] = traceback.format_exception(*record.exc_info)
        plain = logging.makeLogRecord(
            {
                "name": record.name,
                "levelname": record.levelname,
                "levelno": record.levelno,
                "msg": record.getMessage(),
                "created": record.created,
                "msecs": record.msecs,
                **payload,
            }
        )
        return self._inner.format(plain)


def setup_logging(settings: Settings | None = None) -> logging.Handler:
    """Install a single stream handler on the root logger and return it."""
    if settings is None:
        settings = get_settings()
    level = getattr(logging, settings.log_level)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    if settings.log_format == "json":
        handler.setFormatter(StructuredJsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(handler)
    return handler
