r"""Logging backend utilities.

This module builds the console logger used by the default notifier and
provides a JSON formatter for machine-readable log output. This is
useful for log aggregation systems like ELK, Splunk, or CloudWatch Logs.

The library never configures logging by itself. Call ``create_logger``
explicitly, or configure the ``aretry`` logger like any other Python
logger.

Example:
    ```python
    import logging

    from aretry.utils.structured_logging import StructuredFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())

    logger = logging.getLogger("aretry")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    ```
"""

from __future__ import annotations

__all__ = ["DEFAULT_LOG_FORMAT", "StructuredFormatter", "create_logger"]

import json
import logging
import time
from typing import Any

from aretry.config import NOTIFICATION_LOGGER_NAME

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Attributes every LogRecord has, anything else was passed via ``extra``
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Standard fields in the JSON output:
        - timestamp: ISO 8601 timestamp (UTC)
        - level: Log level name
        - logger: Logger name
        - message: Log message
        - module: Module name where log originated
        - function: Function name where log originated
        - line: Line number where log originated

    Fields passed with the ``extra`` parameter of a logging call are
    added as is. ``LoggingNotifier`` adds ``retry_message`` and
    ``retry_timestamp``.

    Example:
        ```pycon
        >>> import logging
        >>> from io import StringIO
        >>> from aretry.utils.structured_logging import StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("test_logger")
        >>> logger.addHandler(handler)
        >>> logger.setLevel(logging.INFO)
        >>> logger.info("Test message", extra={"retry_message": "busy"})
        >>> output = stream.getvalue()
        >>> "Test message" in output
        True
        >>> "retry_message" in output
        True

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002, N802
        """Format timestamp as ISO 8601 with millisecond precision."""
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


class _AretryStreamHandler(logging.StreamHandler):
    """Console handler installed by ``create_logger``."""


def create_logger(
    name: str = NOTIFICATION_LOGGER_NAME,
    level: int = logging.DEBUG,
    structured: bool = False,
) -> logging.Logger:
    """Create a console logger for retry notifications.

    The logger writes to ``stderr`` and does not propagate, so its
    records are not duplicated by the root handlers. Only the named
    logger is configured: the ``aretry`` package logger and the module
    loggers keep their level. Calling this function again with the same
    name reuses the handler instead of adding another one.

    Args:
        name: The logger name (default: ``aretry.notifications``).
        level: The minimum level of the logger (default: DEBUG).
        structured: If ``True``, records are formatted as JSON with
            ``StructuredFormatter``.

    Returns:
        The configured logger.

    Example:
        ```pycon
        >>> from aretry.utils.structured_logging import create_logger
        >>> logger = create_logger("my-app.retry")
        >>> logger.name
        'my-app.retry'
        >>> logger.propagate
        False

        ```
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    formatter = StructuredFormatter() if structured else logging.Formatter(DEFAULT_LOG_FORMAT)
    handler = next((h for h in logger.handlers if isinstance(h, _AretryStreamHandler)), None)
    if handler is None:
        handler = _AretryStreamHandler()
        logger.addHandler(handler)
    handler.setFormatter(formatter)
    return logger
