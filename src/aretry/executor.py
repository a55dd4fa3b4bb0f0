r"""Synchronous retry executor.

This module provides the RetryExecutor class that executes a blocking
operation with a fixed delay between attempts.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
import time
from typing import TYPE_CHECKING, TypeVar

from aretry.executor_core import notify_retry, raise_exhausted_error
from aretry.outcome import NonRetryable, Success, capture

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.config import RetryConfig
    from aretry.notifier import RetryNotifier

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes blocking operations with automatic retry logic.

    The executor runs the operation on the calling thread and sleeps on
    it between attempts. It holds no state besides the notifier, so one
    instance can serve concurrent calls.

    Attributes:
        notifier: The notifier invoked once per retry.

    Example:
        ```pycon
        >>> from aretry.config import RetryConfig
        >>> from aretry.executor import RetryExecutor
        >>> from aretry.notifier import NullNotifier
        >>> executor = RetryExecutor(NullNotifier())
        >>> executor.execute(lambda: "done", RetryConfig(wait=0.0, retries=2))
        'done'

        ```
    """

    def __init__(self, notifier: RetryNotifier) -> None:
        self.notifier = notifier

    def execute(self, operation: Callable[[], T], config: RetryConfig) -> T:
        """Execute the operation until it succeeds or retries run out.

        The operation is executed at most ``config.retries + 1`` times.
        After each ``RetryError`` that leaves a retry available, the
        notifier is invoked and the executor sleeps ``config.wait_seconds``.

        Args:
            operation: The zero-argument callable to execute.
            config: The retry configuration of the call.

        Returns:
            The value returned by the first successful attempt.

        Raises:
            RetryExhaustedError: If every attempt raised ``RetryError``.
            Exception: Any other exception raised by the operation,
                unchanged and on its first occurrence.
        """
        for attempt in range(config.max_attempts):
            outcome = capture(operation)
            if isinstance(outcome, Success):
                logger.debug(f"Attempt {attempt + 1}/{config.max_attempts} succeeded")
                return outcome.value
            if isinstance(outcome, NonRetryable):
                raise outcome.error

            if attempt == config.retries:
                raise_exhausted_error(outcome, config)
            notify_retry(self.notifier, outcome, attempt, config)
            time.sleep(config.wait_seconds)
