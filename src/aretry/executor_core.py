r"""Shared core logic for retry executors.

This module provides helper functions used by both the synchronous and
the asynchronous retry executors. They encapsulate the notification of a
consumed retry and the construction of the terminal error.
"""

from __future__ import annotations

__all__ = ["notify_retry", "raise_exhausted_error"]

import logging
from datetime import datetime
from typing import TYPE_CHECKING, NoReturn

from aretry.exceptions import RetryExhaustedError
from aretry.notifier import notify_safely

if TYPE_CHECKING:
    from aretry.config import RetryConfig
    from aretry.notifier import RetryNotifier
    from aretry.outcome import Retryable

logger: logging.Logger = logging.getLogger(__name__)


def notify_retry(
    notifier: RetryNotifier,
    outcome: Retryable,
    attempt: int,
    config: RetryConfig,
) -> None:
    """Notify that a retryable failure consumed one retry.

    Args:
        notifier: The notifier to invoke.
        outcome: The retryable outcome of the failed attempt.
        attempt: The failed attempt number (0-indexed).
        config: The retry configuration of the call.
    """
    logger.debug(
        f"Attempt {attempt + 1}/{config.max_attempts} failed ({outcome.message}), "
        f"retrying in {config.wait_seconds:.3f}s"
    )
    notify_safely(notifier, outcome.message, datetime.now().astimezone())


def raise_exhausted_error(last: Retryable, config: RetryConfig) -> NoReturn:
    """Raise the terminal error once all retries are consumed.

    Args:
        last: The outcome of the last attempt.
        config: The retry configuration of the call.

    Raises:
        RetryExhaustedError: Always. Its message is the message of the
            last retryable failure and its cause is that failure.
    """
    logger.debug(f"All {config.max_attempts} attempts failed ({last.message})")
    raise RetryExhaustedError(last.message, attempts=config.max_attempts) from last.error
