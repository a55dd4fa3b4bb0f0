r"""Notification hooks invoked on every retry.

A notifier is any object with a ``notify(message, timestamp)`` method.
The executors call it exactly once per consumed retry, before waiting.
It is never called on success, on a non-retryable failure, or on an
invalid configuration.

Example:
    ```pycon
    >>> from aretry import ResilienceRetry
    >>> from aretry.notifier import CallbackNotifier
    >>> messages = []
    >>> retry = ResilienceRetry(CallbackNotifier(lambda msg, ts: messages.append(msg)))

    ```
"""

from __future__ import annotations

__all__ = [
    "CallbackNotifier",
    "LoggingNotifier",
    "NullNotifier",
    "RetryNotifier",
    "notify_safely",
]

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from aretry.config import NOTIFICATION_LOGGER_NAME

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

logger: logging.Logger = logging.getLogger(__name__)


@runtime_checkable
class RetryNotifier(Protocol):
    """Observer notified once per retry.

    Implementations shared between concurrent calls must be safe to
    invoke from several threads or tasks at the same time.
    """

    def notify(self, message: str, timestamp: datetime) -> None:
        """Notify that an attempt failed and will be retried.

        Args:
            message: The message of the retryable failure.
            timestamp: When the failure was observed.
        """


class LoggingNotifier:
    """Notifier that writes one log record per retry.

    Args:
        logger: The logger to write to. Defaults to the
            ``aretry.notifications`` logger.
        level: The log level of the records (default: WARNING).

    Example:
        ```pycon
        >>> import logging
        >>> from datetime import datetime
        >>> from aretry.notifier import LoggingNotifier
        >>> notifier = LoggingNotifier(logging.getLogger("my-app"))
        >>> notifier.notify("service is warming up", datetime.now())

        ```
    """

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.WARNING) -> None:
        self.logger = logger if logger is not None else logging.getLogger(NOTIFICATION_LOGGER_NAME)
        self.level = level

    def notify(self, message: str, timestamp: datetime) -> None:
        self.logger.log(
            self.level,
            "Retrying due to: %s at %s",
            message,
            timestamp.time(),
            extra={"retry_message": message, "retry_timestamp": timestamp.isoformat()},
        )


class CallbackNotifier:
    """Notifier that forwards to a plain function.

    Args:
        callback: A function accepting ``(message, timestamp)``.
    """

    def __init__(self, callback: Callable[[str, datetime], None]) -> None:
        self.callback = callback

    def notify(self, message: str, timestamp: datetime) -> None:
        self.callback(message, timestamp)


class NullNotifier:
    """Notifier that ignores every notification."""

    def notify(self, message: str, timestamp: datetime) -> None:
        pass


def notify_safely(notifier: RetryNotifier, message: str, timestamp: datetime) -> None:
    """Invoke a notifier without letting its failure reach the caller.

    A notifier that raises is logged with its traceback and otherwise
    ignored, so the retry loop continues unchanged.

    Args:
        notifier: The notifier to invoke.
        message: The message of the retryable failure.
        timestamp: When the failure was observed.
    """
    try:
        notifier.notify(message, timestamp)
    except Exception:
        logger.exception(f"Retry notifier {notifier!r} failed for message {message!r}")
