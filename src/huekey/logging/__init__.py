"""Logging and profiling for huekey."""

from .logger import get_logger, setup_logging
from .profiler import Span, SpanProfiler

__all__ = [
    "setup_logging",
    "get_logger",
    "Span",
    "SpanProfiler",
]
