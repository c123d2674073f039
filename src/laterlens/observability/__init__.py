"""Logging and metrics for the extraction engine."""

from __future__ import annotations

from .logging import configure_logging
from .metrics import METRICS, MetricsRecorder

__all__ = ["configure_logging", "METRICS", "MetricsRecorder"]
