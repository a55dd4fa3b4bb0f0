r"""Predicate polling on top of the retry executors.

A poll is described by a label and a boolean check. Each attempt invokes
the check once; a result different from the expected value is turned
into a ``RetryError`` carrying the label, so polling consumes the same
retry budget, notifications and delays as any other retried operation.
"""

from __future__ import annotations

__all__ = ["PollDescriptor"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

from aretry.exceptions import RetryError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


@dataclass(frozen=True)
class PollDescriptor:
    """A labelled boolean check and the value it must reach.

    Attributes:
        label: The human-readable label. It is the message of the
            notifications and of the terminal error.
        check: The zero-argument callable returning a boolean, or an
            awaitable boolean for the async form.
        expected: The value the check must return to end the poll.

    Example:
        ```pycon
        >>> from aretry.poller import PollDescriptor
        >>> poll = PollDescriptor("Waiting for ready", lambda: True, expected=True)
        >>> poll.as_operation()()

        ```
    """

    label: str
    check: Callable[[], bool | Awaitable[bool]]
    expected: bool = True

    def verify(self, result: bool) -> None:
        """Verify the result of one check.

        Args:
            result: The value returned by the check.

        Raises:
            RetryError: If the result is not the expected value.
        """
        if bool(result) != self.expected:
            raise RetryError(self.label)

    def as_operation(self) -> Callable[[], None]:
        """Return a blocking operation that runs the check once."""

        def operation() -> None:
            self.verify(self.check())

        return operation

    def as_async_operation(self) -> Callable[[], Awaitable[None]]:
        """Return a suspending operation that awaits the check once."""

        async def operation() -> None:
            self.verify(await self.check())

        return operation
