r"""Shared test helpers for the retry engine tests.

The helpers build operations and checks that fail a given number of
times before succeeding, and count how many times they were executed.
"""

from __future__ import annotations

__all__ = [
    "NON_RETRYABLE_MESSAGE",
    "FlakyCheck",
    "FlakyOperation",
    "raise_non_retryable",
    "raise_non_retryable_async",
]

from aretry import RetryError

NON_RETRYABLE_MESSAGE = "This Exception does not trigger a retry"


class FlakyOperation:
    """Operation raising ``RetryError`` for the first ``failures`` calls.

    Args:
        failures: The number of calls that fail before success. Use
            ``None`` to always fail.
        message: The message of the raised ``RetryError``.
        value: The value returned on success.
    """

    def __init__(self, failures: int | None, message: str = "Problem with Ingestion", value: object = True) -> None:
        self.failures = failures
        self.message = message
        self.value = value
        self.calls = 0

    def _attempt(self) -> object:
        self.calls += 1
        if self.failures is None or self.calls <= self.failures:
            raise RetryError(self.message)
        return self.value

    def __call__(self) -> object:
        return self._attempt()

    async def run_async(self) -> object:
        return self._attempt()


class FlakyCheck:
    """Check returning ``not target`` for the first ``misses`` calls.

    Args:
        target: The value returned once the misses are consumed.
        misses: The number of calls returning ``not target``. Use ``None``
            to never reach the target.
    """

    def __init__(self, target: bool, misses: int | None) -> None:
        self.target = target
        self.misses = misses
        self.calls = 0

    def _check(self) -> bool:
        self.calls += 1
        if self.misses is None or self.calls <= self.misses:
            return not self.target
        return self.target

    def __call__(self) -> bool:
        return self._check()

    async def run_async(self) -> bool:
        return self._check()


def raise_non_retryable() -> None:
    raise ValueError(NON_RETRYABLE_MESSAGE)


async def raise_non_retryable_async() -> None:
    raise ValueError(NON_RETRYABLE_MESSAGE)
