"""Shared utilities for Color³."""

from color3.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
    log_performance,
)

__all__ = [
    "StructuredJSONFormatter",
    "configure_logging",
    "get_logger",
    "log_performance",
]
