r"""Factory wiring a retry engine to a notifier.

Registering the engine in a dependency-injection container reduces to
calling ``create_resilience_retry`` from the container's factory hook.
"""

from __future__ import annotations

__all__ = ["create_resilience_retry"]

import logging
from typing import TYPE_CHECKING

from aretry.notifier import LoggingNotifier, NullNotifier
from aretry.retry import ResilienceRetry
from aretry.utils.structured_logging import create_logger

if TYPE_CHECKING:
    from aretry.notifier import RetryNotifier

logger: logging.Logger = logging.getLogger(__name__)


def create_resilience_retry(
    notifier: RetryNotifier | None = None,
    *,
    add_logger_support: bool = True,
    structured: bool = False,
) -> ResilienceRetry:
    """Create a retry engine.

    Args:
        notifier: The notifier to wire. If ``None``, a notifier is
            chosen from ``add_logger_support``.
        add_logger_support: If ``True`` and no notifier is given, retries
            are logged to the console through a ``LoggingNotifier``.
            Otherwise retries are not reported.
        structured: If ``True``, the console logger emits JSON records.
            Ignored when a notifier is given.

    Returns:
        The retry engine.

    Example:
        ```pycon
        >>> from aretry import create_resilience_retry
        >>> retry = create_resilience_retry(add_logger_support=False)
        >>> from aretry.notifier import NullNotifier
        >>> isinstance(retry.notifier, NullNotifier)
        True

        ```
    """
    if notifier is None:
        if add_logger_support:
            notifier = LoggingNotifier(create_logger(structured=structured))
        else:
            notifier = NullNotifier()
    logger.debug(f"Creating ResilienceRetry with {notifier!r}")
    return ResilienceRetry(notifier)
