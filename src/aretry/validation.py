r"""Parameter validation utilities for the retry engine.

This module provides validation functions for the retry parameters to
ensure they meet the required constraints before the first attempt is
executed.
"""

from __future__ import annotations

__all__ = ["validate_retries", "validate_wait"]

from datetime import timedelta

from aretry.config import RETRY_COUNT_ERROR_MESSAGE
from aretry.exceptions import ConfigurationError


def validate_retries(retries: int) -> None:
    """Validate the number of retries.

    Args:
        retries: The number of retries allowed after the first attempt.
            Must be an integer >= 1.

    Raises:
        ConfigurationError: If ``retries`` is not a positive integer.

    Example:
        ```pycon
        >>> from aretry.validation import validate_retries
        >>> validate_retries(3)
        >>> validate_retries(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        aretry.exceptions.ConfigurationError: Retry count should be greater than zero

        ```
    """
    # bool is a subclass of int but True is not a retry count
    if isinstance(retries, bool) or not isinstance(retries, int) or retries <= 0:
        raise ConfigurationError(RETRY_COUNT_ERROR_MESSAGE)


def validate_wait(wait: float | timedelta) -> float:
    """Validate the delay between attempts and convert it to seconds.

    Args:
        wait: The delay in seconds, or as a ``timedelta``. Must be >= 0.

    Returns:
        The delay in seconds.

    Raises:
        ConfigurationError: If ``wait`` is negative or not a number.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from aretry.validation import validate_wait
        >>> validate_wait(0.5)
        0.5
        >>> validate_wait(timedelta(milliseconds=250))
        0.25

        ```
    """
    if isinstance(wait, timedelta):
        seconds = wait.total_seconds()
    elif isinstance(wait, (int, float)) and not isinstance(wait, bool):
        seconds = float(wait)
    else:
        msg = f"wait must be a number of seconds or a timedelta, got {type(wait).__name__}"
        raise ConfigurationError(msg)
    if seconds < 0:
        msg = f"wait must be >= 0, got {seconds}"
        raise ConfigurationError(msg)
    return seconds
