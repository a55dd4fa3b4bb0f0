r"""Default configuration values and the retry configuration object."""

from __future__ import annotations

__all__ = [
    "DEFAULT_RETRIES",
    "DEFAULT_WAIT",
    "NOTIFICATION_LOGGER_NAME",
    "RETRY_COUNT_ERROR_MESSAGE",
    "RetryConfig",
]

from dataclasses import dataclass, field
from datetime import timedelta

# Default delay in seconds between two attempts
DEFAULT_WAIT = 1.0

# Default number of retries after the first attempt
DEFAULT_RETRIES = 3

RETRY_COUNT_ERROR_MESSAGE = "Retry count should be greater than zero"

# Logger carrying the retry notifications, kept apart from the module loggers
NOTIFICATION_LOGGER_NAME = "aretry.notifications"


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for one retry call.

    The values are validated on construction, so an invalid
    configuration never reaches the executor.

    Attributes:
        wait: The fixed delay between two attempts, in seconds or as a
            ``timedelta``.
        retries: The number of retries allowed after the first attempt.
            The operation is executed at most ``retries + 1`` times.
        wait_seconds: The delay converted to seconds.

    Raises:
        ConfigurationError: If ``retries`` is not a positive integer or
            ``wait`` is negative.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from aretry.config import RetryConfig
        >>> config = RetryConfig(wait=timedelta(milliseconds=10), retries=2)
        >>> config.wait_seconds
        0.01
        >>> config.max_attempts
        3

        ```
    """

    wait: float | timedelta = DEFAULT_WAIT
    retries: int = DEFAULT_RETRIES
    wait_seconds: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        # Local import, the validation module depends on this module
        from aretry.validation import validate_retries, validate_wait

        validate_retries(self.retries)
        object.__setattr__(self, "wait_seconds", validate_wait(self.wait))

    @property
    def max_attempts(self) -> int:
        """The maximum number of times the operation is executed."""
        return self.retries + 1
