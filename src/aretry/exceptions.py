r"""Define the exceptions raised by the retry engine.

Three kinds of failure are distinguished:

- ``RetryError``: raised by an operation to signal a transient failure.
  It is the only exception that makes the engine try again.
- ``RetryExhaustedError``: raised by the engine when the retry budget is
  consumed and the last attempt still failed with a ``RetryError``.
- ``ConfigurationError``: raised before any attempt when the retry
  parameters are invalid.

Any other exception is never retried and propagates unchanged.
"""

from __future__ import annotations

__all__ = ["ConfigurationError", "RetryError", "RetryExhaustedError"]


class RetryError(Exception):
    """Signal a transient failure that should be retried.

    Args:
        message: A human-readable description of the failure. It is
            forwarded to the notifier on every retry.

    Example:
        ```pycon
        >>> from aretry.exceptions import RetryError
        >>> error = RetryError("service is warming up")
        >>> error.message
        'service is warming up'
        >>> str(error)
        'service is warming up'

        ```
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RetryExhaustedError(RetryError):
    """Raised when all retries are consumed without success.

    The message is the message of the last ``RetryError`` observed,
    unwrapped. The last ``RetryError`` is also chained as ``__cause__``.

    Args:
        message: The message of the last retryable failure.
        attempts: The number of times the operation was executed.

    Example:
        ```pycon
        >>> from aretry.exceptions import RetryExhaustedError
        >>> error = RetryExhaustedError("service is warming up", attempts=4)
        >>> error.message
        'service is warming up'
        >>> error.attempts
        4

        ```
    """

    def __init__(self, message: str, attempts: int | None = None) -> None:
        super().__init__(message)
        self.attempts = attempts


class ConfigurationError(ValueError):
    """Raised when retry parameters are invalid.

    Example:
        ```pycon
        >>> from aretry.exceptions import ConfigurationError
        >>> raise ConfigurationError("Retry count should be greater than zero")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        aretry.exceptions.ConfigurationError: Retry count should be greater than zero

        ```
    """
