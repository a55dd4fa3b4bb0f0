r"""Unit tests for the retry notifiers."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING
from unittest.mock import Mock

from aretry.notifier import (
    CallbackNotifier,
    LoggingNotifier,
    NullNotifier,
    RetryNotifier,
    notify_safely,
)

if TYPE_CHECKING:
    import pytest

TIMESTAMP = datetime(2024, 5, 17, 10, 30, 15, 250000)


def test_notifiers_implement_protocol() -> None:
    assert isinstance(LoggingNotifier(), RetryNotifier)
    assert isinstance(CallbackNotifier(Mock()), RetryNotifier)
    assert isinstance(NullNotifier(), RetryNotifier)


#####################################
#     Tests for LoggingNotifier     #
#####################################


def test_logging_notifier_default_logger() -> None:
    notifier = LoggingNotifier()
    assert notifier.logger.name == "aretry.notifications"
    assert notifier.level == logging.WARNING


def test_logging_notifier_logs_warning(caplog: pytest.LogCaptureFixture) -> None:
    notifier = LoggingNotifier(logging.getLogger("aretry.tests"))
    with caplog.at_level(logging.WARNING, logger="aretry.tests"):
        notifier.notify("Waiting for True", TIMESTAMP)

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.levelno == logging.WARNING
    assert record.getMessage() == "Retrying due to: Waiting for True at 10:30:15.250000"
    assert record.retry_message == "Waiting for True"
    assert record.retry_timestamp == "2024-05-17T10:30:15.250000"


def test_logging_notifier_custom_level(caplog: pytest.LogCaptureFixture) -> None:
    notifier = LoggingNotifier(logging.getLogger("aretry.tests"), level=logging.INFO)
    with caplog.at_level(logging.INFO, logger="aretry.tests"):
        notifier.notify("busy", TIMESTAMP)

    assert [record.levelno for record in caplog.records] == [logging.INFO]


######################################
#     Tests for CallbackNotifier     #
######################################


def test_callback_notifier_forwards_arguments() -> None:
    callback = Mock()
    CallbackNotifier(callback).notify("busy", TIMESTAMP)
    callback.assert_called_once_with("busy", TIMESTAMP)


def test_null_notifier_does_nothing() -> None:
    NullNotifier().notify("busy", TIMESTAMP)


###################################
#     Tests for notify_safely     #
###################################


def test_notify_safely_calls_notifier() -> None:
    notifier = Mock(spec=["notify"])
    notify_safely(notifier, "busy", TIMESTAMP)
    notifier.notify.assert_called_once_with("busy", TIMESTAMP)


def test_notify_safely_logs_failing_notifier(caplog: pytest.LogCaptureFixture) -> None:
    notifier = Mock(spec=["notify"])
    notifier.notify.side_effect = RuntimeError("sink is down")
    with caplog.at_level(logging.ERROR, logger="aretry.notifier"):
        notify_safely(notifier, "busy", TIMESTAMP)

    notifier.notify.assert_called_once_with("busy", TIMESTAMP)
    assert len(caplog.records) == 1
    assert caplog.records[0].exc_info is not None
    assert "busy" in caplog.records[0].getMessage()
