"""Utility helpers shared across the :mod:`transcript_annotator` package."""

from __future__ import annotations

from .logging_config import configure_logging
from .observability import (
    MetricHandle,
    StructuredLoggerAdapter,
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)

__all__ = [
    "configure_logging",
    "MetricHandle",
    "StructuredLoggerAdapter",
    "add_span_attributes",
    "create_counter",
    "create_histogram",
    "get_logger",
    "record_exception",
    "start_span",
]
