"""Structured JSON logging for substackify.

All SDK loggers live under the ``substackify`` package logger, which owns
the only handler.  Every record is emitted as a single-line JSON object::

    {"ts": "2026-10-19T12:00:00.123456+00:00", "level": "INFO",
     "logger": "substackify.client", "message": "draft created",
     "op": "create_draft_post", "draft_id": 123}

:class:`~substackify.client.SubstackifyClient` applies
``SubstackifyConfig.log_level`` through :func:`configure_logging`.

Usage::

    from substackify.observability import configure_logging, get_logger

    configure_logging("INFO")
    log = get_logger("substackify.client")
    log.info("draft created", extra={"extra_fields": {"draft_id": 123}})
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

from substackify.utils.redact import redact

ROOT_LOGGER = "substackify"

_handler: logging.StreamHandler | None = None


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    Guaranteed keys are ``ts``, ``level``, ``logger`` and ``message``.
    Fields passed via ``extra={"extra_fields": {...}}`` are redacted (session
    cookies, tokens) and merged into the top-level object.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        fields = getattr(record, "extra_fields", None)
        if isinstance(fields, dict):
            entry.update(redact(fields))

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(entry, default=str, ensure_ascii=False)


def resolve_level(level: int | str) -> int:
    """Turn ``"info"``, ``"DEBUG"``, ``logging.INFO`` etc. into a level number.

    Raises
    ------
    ValueError
        If *level* is not a known level name or a non-negative int.
    """
    if isinstance(level, bool):
        raise ValueError(f"invalid log level: {level!r}")
    if isinstance(level, int):
        if level < 0:
            raise ValueError(f"invalid log level: {level!r}")
        return level
    number = logging.getLevelName(str(level).strip().upper())
    if not isinstance(number, int):
        raise ValueError(f"unknown log level name: {level!r}")
    return number


def _root_handler() -> logging.StreamHandler:
    global _handler
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(StructuredFormatter())
        root = logging.getLogger(ROOT_LOGGER)
        root.addHandler(_handler)
        root.setLevel(logging.WARNING)
        root.propagate = False
    return _handler


def configure_logging(
    level: int | str = logging.WARNING,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Set the level (and optionally the output stream) of all SDK loggers.

    Returns the ``substackify`` package logger.
    """
    handler = _root_handler()
    if stream is not None:
        handler.setStream(stream)
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(resolve_level(level))
    return root


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Return a logger in the ``substackify`` hierarchy.

    Names outside the hierarchy are nested under it, so ``"drafts"``
    becomes ``"substackify.drafts"``.  Child loggers carry no handler of
    their own; records propagate to the package logger.
    """
    _root_handler()
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
