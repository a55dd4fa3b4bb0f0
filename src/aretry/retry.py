r"""Retry engine exposing the public entry points.

Example:
    ```pycon
    >>> from aretry import ResilienceRetry, RetryError
    >>> from aretry.notifier import NullNotifier
    >>> retry = ResilienceRetry(NullNotifier())
    >>> attempts = []
    >>> def ingest():
    ...     attempts.append(1)
    ...     if len(attempts) < 3:
    ...         raise RetryError("Problem with ingestion")
    ...     return True
    ...
    >>> retry.perform_return(ingest, wait=0.0, retries=3)
    True
    >>> len(attempts)
    3

    ```
"""

from __future__ import annotations

__all__ = ["ResilienceRetry"]

from typing import TYPE_CHECKING, TypeVar

from aretry.base import BaseResilienceRetry
from aretry.config import RetryConfig
from aretry.executor import RetryExecutor
from aretry.executor_async import AsyncRetryExecutor
from aretry.poller import PollDescriptor

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable
    from datetime import timedelta

    from aretry.notifier import RetryNotifier

T = TypeVar("T")


class ResilienceRetry(BaseResilienceRetry):
    """Retry engine with a fixed delay and a bounded number of retries.

    Every entry point validates ``retries`` before the first attempt and
    raises ``ConfigurationError`` if it is not a positive integer. The
    operation is then executed at most ``retries + 1`` times:

    - a ``RetryError`` consumes one retry: the notifier is invoked with
      its message and the engine waits ``wait`` before the next attempt;
    - when no retry is left, ``RetryExhaustedError`` is raised with the
      message of the last ``RetryError``;
    - any other exception propagates unchanged on its first occurrence.

    Args:
        notifier: The notifier invoked once per retry.

    Attributes:
        notifier: The notifier invoked once per retry.
        executor: The executor used by the blocking entry points.
        async_executor: The executor used by the async entry points.
    """

    def __init__(self, notifier: RetryNotifier) -> None:
        self.notifier = notifier
        self.executor = RetryExecutor(notifier)
        self.async_executor = AsyncRetryExecutor(notifier)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(notifier={self.notifier!r})"

    def perform(self, operation: Callable[[], object], wait: float | timedelta, retries: int) -> None:
        self.executor.execute(operation, RetryConfig(wait=wait, retries=retries))

    async def perform_async(
        self, operation: Callable[[], Awaitable[object]], wait: float | timedelta, retries: int
    ) -> None:
        await self.async_executor.execute(operation, RetryConfig(wait=wait, retries=retries))

    def perform_return(self, operation: Callable[[], T], wait: float | timedelta, retries: int) -> T:
        return self.executor.execute(operation, RetryConfig(wait=wait, retries=retries))

    async def perform_return_async(
        self, operation: Callable[[], Awaitable[T]], wait: float | timedelta, retries: int
    ) -> T:
        return await self.async_executor.execute(
            operation, RetryConfig(wait=wait, retries=retries)
        )

    def until_true(
        self, label: str, check: Callable[[], bool], wait: float | timedelta, retries: int
    ) -> None:
        self._poll(PollDescriptor(label, check, expected=True), wait, retries)

    async def until_true_async(
        self, label: str, check: Callable[[], Awaitable[bool]], wait: float | timedelta, retries: int
    ) -> None:
        await self._poll_async(PollDescriptor(label, check, expected=True), wait, retries)

    def until_false(
        self, label: str, check: Callable[[], bool], wait: float | timedelta, retries: int
    ) -> None:
        self._poll(PollDescriptor(label, check, expected=False), wait, retries)

    async def until_false_async(
        self, label: str, check: Callable[[], Awaitable[bool]], wait: float | timedelta, retries: int
    ) -> None:
        await self._poll_async(PollDescriptor(label, check, expected=False), wait, retries)

    def _poll(self, poll: PollDescriptor, wait: float | timedelta, retries: int) -> None:
        self.executor.execute(poll.as_operation(), RetryConfig(wait=wait, retries=retries))

    async def _poll_async(self, poll: PollDescriptor, wait: float | timedelta, retries: int) -> None:
        await self.async_executor.execute(
            poll.as_async_operation(), RetryConfig(wait=wait, retries=retries)
        )
