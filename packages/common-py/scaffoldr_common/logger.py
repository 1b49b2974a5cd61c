"""
Scaffoldr Logging

Thin layer over the standard library logging module:
- get_logger(name) returns a ScaffoldrLogger that accepts keyword context
- configure_logging(level, json_format) sets up the "scaffoldr" root logger

Usage:
    from scaffoldr_common.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Rendered build script", dsl="kotlin", java=21)
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

ROOT_LOGGER_NAME = "scaffoldr"

_STANDARD_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Format records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class ContextFormatter(logging.Formatter):
    """Plain text formatter that appends keyword context as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = [
            f"{key}={value}"
            for key, value in record.__dict__.items()
            if key not in _STANDARD_ATTRS and not key.startswith("_")
        ]
        if extras:
            return f"{base} | {' '.join(extras)}"
        return base


class ScaffoldrLogger:
    """
    Logger wrapper that turns keyword arguments into structured context.

    Example:
        >>> logger = ScaffoldrLogger("scaffoldr.sdk")
        >>> logger.debug("Template loaded", template="gradle/build.gradle.kts.j2")
    """

    def __init__(self, name: str):
        self._logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    def _log(self, level: int, msg: str, exc_info: bool = False, **context: Any) -> None:
        if self._logger.isEnabledFor(level):
            self._logger.log(level, msg, exc_info=exc_info, extra=context or None)

    def debug(self, msg: str, **context: Any) -> None:
        self._log(logging.DEBUG, msg, **context)

    def info(self, msg: str, **context: Any) -> None:
        self._log(logging.INFO, msg, **context)

    def warning(self, msg: str, **context: Any) -> None:
        self._log(logging.WARNING, msg, **context)

    def error(self, msg: str, **context: Any) -> None:
        self._log(logging.ERROR, msg, **context)

    def exception(self, msg: str, **context: Any) -> None:
        self._log(logging.ERROR, msg, exc_info=True, **context)


def get_logger(name: str) -> ScaffoldrLogger:
    """
    Get a scaffoldr logger.

    Module names outside the scaffoldr namespace are nested under it so that
    configure_logging() controls every logger created through this function.
    """
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return ScaffoldrLogger(name)


def configure_logging(
    level: str = "warning",
    json_format: bool = False,
    stream: Optional[Any] = None,
) -> logging.Logger:
    """
    Configure the scaffoldr root logger.

    Calling it again replaces the previous handler, so the CLI can switch
    levels (e.g. --verbose) after settings have been applied.

    Args:
        level: One of debug, info, warning, error
        json_format: Emit JSON lines instead of plain text
        stream: Output stream (defaults to stderr)

    Returns:
        The configured root logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(ContextFormatter("%(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
    root.propagate = False
    return root


__all__ = [
    "ScaffoldrLogger",
    "JsonFormatter",
    "ContextFormatter",
    "get_logger",
    "configure_logging",
]
