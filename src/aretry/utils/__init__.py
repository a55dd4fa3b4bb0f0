r"""Utility functions for logging the retry lifecycle."""

from __future__ import annotations

__all__ = ["StructuredFormatter", "create_logger"]

from aretry.utils.structured_logging import StructuredFormatter, create_logger
