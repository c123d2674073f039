"""
Defines Prometheus metrics for the extraction engine.
"""

from __future__ import annotations

from typing import Any, Dict

from prometheus_client import REGISTRY as _PROM_REGISTRY
from prometheus_client import Counter as _OrigCounter
from prometheus_client import Histogram as _OrigHistogram

# ---------------------------------------------------------------------------
# Duplicate-safe Prometheus metric wrappers
# ---------------------------------------------------------------------------
# Re-importing this module (as happens under test reloads) must reuse the
# collectors already present in the default registry.


def _duplicate_safe_factory(metric_cls):
    """Return a factory that reuses an existing collector if already present."""

    def _factory(name: str, documentation: str, *args, **kwargs):  # type: ignore[override]
        existing = _PROM_REGISTRY._names_to_collectors.get(name)
        if existing is not None:
            return existing  # type: ignore[return-value]

        try:
            return metric_cls(name, documentation, *args, **kwargs)  # type: ignore[call-arg]
        except ValueError:
            # Registration lost the race; fall back to the now-existing collector.
            return _PROM_REGISTRY._names_to_collectors[name]  # type: ignore[return-value]

    return _factory


Counter = _duplicate_safe_factory(_OrigCounter)  # type: ignore[assignment]
Histogram = _duplicate_safe_factory(_OrigHistogram)  # type: ignore[assignment]


def _create_metrics() -> Dict[str, Any]:
    return {
        "extractions": Counter(
            "laterlens_extractions_total",
            "Extraction calls by outcome and content source",
            ["outcome", "source"],
        ),
        "extraction_duration": Histogram(
            "laterlens_extraction_duration_seconds",
            "Time spent extracting content from a loaded document",
            buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
        ),
        "extraction_quality": Histogram(
            "laterlens_extraction_quality",
            "Quality score reported for extracted content",
            buckets=(0.0, 0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0),
        ),
        "strategy_failures": Counter(
            "laterlens_locator_strategy_failures_total",
            "Locator strategies that raised while evaluating a document",
            ["strategy"],
        ),
    }


METRICS: Dict[str, Any] = _create_metrics()


class MetricsRecorder:
    """Thin switch in front of the process-wide collectors."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    def record_extraction(self, outcome: str, source: str, quality: float, duration: float) -> None:
        if not self.enabled:
            return
        METRICS["extractions"].labels(outcome=outcome, source=source).inc()
        METRICS["extraction_duration"].observe(duration)
        METRICS["extraction_quality"].observe(quality)

    def record_strategy_failure(self, strategy: str) -> None:
        if not self.enabled:
            return
        METRICS["strategy_failures"].labels(strategy=strategy).inc()
