from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from aretry import ResilienceRetry

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_notifier() -> Mock:
    """Create a mock notifier recording every retry notification."""
    return Mock(spec=["notify"])


@pytest.fixture
def resilience_retry(mock_notifier: Mock) -> ResilienceRetry:
    """Create a retry engine wired to the mock notifier."""
    return ResilienceRetry(mock_notifier)
