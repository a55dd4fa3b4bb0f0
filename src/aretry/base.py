r"""Abstract interface of the retry engine."""

from __future__ import annotations

__all__ = ["BaseResilienceRetry"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable
    from datetime import timedelta

T = TypeVar("T")


class BaseResilienceRetry(ABC):
    """Abstract base class for retry engines.

    A retry engine executes an operation and retries it on ``RetryError``
    up to ``retries`` times with a fixed ``wait`` between attempts. It
    exposes four operation shapes (blocking or async, with or without a
    return value) and four polling shapes.
    """

    @abstractmethod
    def perform(self, operation: Callable[[], object], wait: float | timedelta, retries: int) -> None:
        """Execute a blocking operation, retrying on ``RetryError``."""

    @abstractmethod
    async def perform_async(
        self, operation: Callable[[], Awaitable[object]], wait: float | timedelta, retries: int
    ) -> None:
        """Execute an async operation, retrying on ``RetryError``."""

    @abstractmethod
    def perform_return(self, operation: Callable[[], T], wait: float | timedelta, retries: int) -> T:
        """Execute a blocking operation and return its value."""

    @abstractmethod
    async def perform_return_async(
        self, operation: Callable[[], Awaitable[T]], wait: float | timedelta, retries: int
    ) -> T:
        """Execute an async operation and return its value."""

    @abstractmethod
    def until_true(
        self, label: str, check: Callable[[], bool], wait: float | timedelta, retries: int
    ) -> None:
        """Poll a blocking check until it returns ``True``."""

    @abstractmethod
    async def until_true_async(
        self, label: str, check: Callable[[], Awaitable[bool]], wait: float | timedelta, retries: int
    ) -> None:
        """Poll an async check until it returns ``True``."""

    @abstractmethod
    def until_false(
        self, label: str, check: Callable[[], bool], wait: float | timedelta, retries: int
    ) -> None:
        """Poll a blocking check until it returns ``False``."""

    @abstractmethod
    async def until_false_async(
        self, label: str, check: Callable[[], Awaitable[bool]], wait: float | timedelta, retries: int
    ) -> None:
        """Poll an async check until it returns ``False``."""
