r"""aretry - Fixed-delay retry engine for blocking and async operations.

This package executes an operation and retries it when it raises
``RetryError``, up to a fixed number of retries with a fixed delay
between attempts. An observer is notified on every retry. Boolean checks
can be polled until they reach a target value with the same retry rules.

Key Features:
    - Blocking and async entry points, with or without a return value
    - Polling of boolean checks until they become True or False
    - Fail-fast: only ``RetryError`` is retried, anything else propagates
    - Pluggable notifiers (logging, plain callbacks, no-op)
    - Optional JSON log formatting for log aggregation systems

Example:
    ```pycon
    >>> from aretry import RetryError, create_resilience_retry
    >>> retry = create_resilience_retry(add_logger_support=False)
    >>> def fetch():
    ...     return {"status": "ok"}
    ...
    >>> retry.perform_return(fetch, wait=0.5, retries=3)
    {'status': 'ok'}
    >>> retry.until_true("Waiting for ready", lambda: True, wait=0.5, retries=3)

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_RETRIES",
    "DEFAULT_WAIT",
    "BaseResilienceRetry",
    "CallbackNotifier",
    "ConfigurationError",
    "LoggingNotifier",
    "NullNotifier",
    "ResilienceRetry",
    "RetryConfig",
    "RetryError",
    "RetryExhaustedError",
    "RetryNotifier",
    "__version__",
    "create_resilience_retry",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.base import BaseResilienceRetry
from aretry.config import DEFAULT_RETRIES, DEFAULT_WAIT, RetryConfig
from aretry.exceptions import ConfigurationError, RetryError, RetryExhaustedError
from aretry.factory import create_resilience_retry
from aretry.notifier import CallbackNotifier, LoggingNotifier, NullNotifier, RetryNotifier
from aretry.retry import ResilienceRetry

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
