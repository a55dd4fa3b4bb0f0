r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that executes a
suspending operation with a fixed delay between attempts.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import logging
from typing import TYPE_CHECKING, TypeVar

from aretry.executor_core import notify_retry, raise_exhausted_error
from aretry.outcome import NonRetryable, Success, capture_async

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.config import RetryConfig
    from aretry.notifier import RetryNotifier

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes async operations with automatic retry logic.

    The attempt loop is the same as ``RetryExecutor`` but the operation
    is awaited and the delay uses ``asyncio.sleep()``, so other tasks run
    while a call is waiting. Cancelling the task aborts the call during
    a wait or an attempt.

    Attributes:
        notifier: The notifier invoked once per retry.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.config import RetryConfig
        >>> from aretry.executor_async import AsyncRetryExecutor
        >>> from aretry.notifier import NullNotifier
        >>> async def fetch():
        ...     return "done"
        ...
        >>> executor = AsyncRetryExecutor(NullNotifier())
        >>> asyncio.run(executor.execute(fetch, RetryConfig(wait=0.0, retries=2)))
        'done'

        ```
    """

    def __init__(self, notifier: RetryNotifier) -> None:
        self.notifier = notifier

    async def execute(self, operation: Callable[[], Awaitable[T]], config: RetryConfig) -> T:
        """Execute the async operation until it succeeds or retries run
        out.

        Args:
            operation: The zero-argument callable returning an awaitable.
            config: The retry configuration of the call.

        Returns:
            The value produced by the first successful attempt.

        Raises:
            RetryExhaustedError: If every attempt raised ``RetryError``.
            Exception: Any other exception raised by the operation,
                unchanged and on its first occurrence.
        """
        for attempt in range(config.max_attempts):
            outcome = await capture_async(operation)
            if isinstance(outcome, Success):
                logger.debug(f"Attempt {attempt + 1}/{config.max_attempts} succeeded")
                return outcome.value
            if isinstance(outcome, NonRetryable):
                raise outcome.error

            if attempt == config.retries:
                raise_exhausted_error(outcome, config)
            notify_retry(self.notifier, outcome, attempt, config)
            await asyncio.sleep(config.wait_seconds)
