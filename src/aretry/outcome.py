r"""Outcome classification for retry attempts.

This module runs one attempt of an operation and classifies how it ended
into a tagged outcome. The executors inspect the outcome explicitly
instead of relying on nested ``try`` blocks.

Only ``RetryError`` is retryable. ``RetryExhaustedError`` raised by a
nested retry call is terminal, so it is classified as non-retryable like
any other exception.
"""

from __future__ import annotations

__all__ = [
    "NonRetryable",
    "Outcome",
    "Retryable",
    "Success",
    "capture",
    "capture_async",
    "classify",
]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar, Union

from aretry.exceptions import RetryError, RetryExhaustedError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """The attempt completed and produced ``value``."""

    value: T


@dataclass(frozen=True)
class Retryable:
    """The attempt raised a transient failure."""

    error: RetryError

    @property
    def message(self) -> str:
        """The message of the retryable failure."""
        return self.error.message


@dataclass(frozen=True)
class NonRetryable:
    """The attempt raised an exception that must propagate."""

    error: Exception


Outcome = Union[Success[Any], Retryable, NonRetryable]


def classify(error: Exception) -> Retryable | NonRetryable:
    """Classify an exception raised by an attempt.

    Args:
        error: The exception raised by the operation.

    Returns:
        ``Retryable`` for a ``RetryError``, ``NonRetryable`` otherwise.

    Example:
        ```pycon
        >>> from aretry.exceptions import RetryError
        >>> from aretry.outcome import classify
        >>> classify(RetryError("busy"))
        Retryable(error=RetryError('busy'))
        >>> classify(KeyError("missing"))
        NonRetryable(error=KeyError('missing'))

        ```
    """
    if isinstance(error, RetryError) and not isinstance(error, RetryExhaustedError):
        return Retryable(error)
    return NonRetryable(error)


def capture(operation: Callable[[], T]) -> Outcome:
    """Execute a blocking operation once and capture its outcome.

    Args:
        operation: The zero-argument callable to execute.

    Returns:
        The outcome of the attempt.

    Example:
        ```pycon
        >>> from aretry.outcome import capture
        >>> capture(lambda: 42)
        Success(value=42)

        ```
    """
    try:
        return Success(operation())
    except Exception as exc:  # noqa: BLE001
        return classify(exc)


async def capture_async(
    operation: Callable[[], Awaitable[T]],
) -> Outcome:
    """Execute a suspending operation once and capture its outcome.

    ``asyncio.CancelledError`` is not an ``Exception`` and is never
    captured, so cancelling the calling task aborts the attempt.

    Args:
        operation: The zero-argument callable returning an awaitable.

    Returns:
        The outcome of the attempt.
    """
    try:
        return Success(await operation())
    except Exception as exc:  # noqa: BLE001
        return classify(exc)
