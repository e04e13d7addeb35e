"""
Prometheus metrics for drift detection.

Defines counters, gauges, and histograms describing every drift check, labeled
by monitored signal so that several engines in one process report separately.
The `PrometheusMetrics` class serves the text exposition payload with a short
TTL cache to keep frequent scrapes cheap.
"""

import time
from typing import Mapping, Optional

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, Info, generate_latest

from driftwatch import __version__
from driftwatch.core.config import get_settings

# --- Prometheus Metric Definitions ---

# Check outcomes
DRIFT_CHECKS_TOTAL = Counter(
    "drift_checks_total",
    "Total number of drift checks by outcome (computed, skipped, cached)",
    ["signal", "outcome"],
)
DRIFT_DETECTIONS_TOTAL = Counter(
    "drift_detections_total",
    "Total number of computed checks that detected drift",
    ["signal", "severity"],
)
DRIFT_DETECTION_DURATION = Histogram(
    "drift_detection_duration_seconds",
    "Time spent answering a drift check",
    ["signal"],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0),
)

# Latest scores
DRIFT_AVERAGE_SCORE = Gauge(
    "drift_average_score",
    "Aggregate drift score of the latest computed check",
    ["signal"],
)
DRIFT_METHOD_SCORE = Gauge(
    "drift_method_score",
    "Per-method drift score of the latest computed check",
    ["signal", "method"],
)

# Engine state
DRIFT_RESULT_CACHE_SIZE = Gauge(
    "drift_result_cache_size",
    "Number of memoized detection results",
    ["signal"],
)
DRIFT_HISTORY_SIZE = Gauge(
    "drift_history_size",
    "Number of entries in the detection history",
    ["signal"],
)
DRIFT_BASELINE_SIZE = Gauge(
    "drift_baseline_size",
    "Number of samples in the current baseline",
    ["signal"],
)

ENGINE_INFO = Info("driftwatch_engine", "Drift engine version information")


class PrometheusMetrics:
    """Serves the Prometheus exposition payload.

    Includes a caching mechanism to reduce the overhead of generating the
    metrics payload on every scrape.
    """

    def __init__(self):
        self.settings = get_settings()
        ENGINE_INFO.info({"version": __version__})
        self._metrics_cache: Optional[bytes] = None
        self._metrics_cache_ts: Optional[float] = None

    def get_metrics(self) -> bytes:
        """Generates and returns the metrics in Prometheus text format.

        Returns:
            A byte string containing the metrics in Prometheus format.
        """
        now = time.time()
        ttl = self.settings.monitoring.metrics_cache_ttl
        if self._metrics_cache and self._metrics_cache_ts and (now - self._metrics_cache_ts) < ttl:
            return self._metrics_cache

        payload = generate_latest()
        self._metrics_cache = payload
        self._metrics_cache_ts = now
        return payload

    @staticmethod
    def get_metrics_content_type() -> str:
        """Returns the content type for the Prometheus text format."""
        return CONTENT_TYPE_LATEST


_metrics_instance: Optional[PrometheusMetrics] = None


def get_metrics() -> PrometheusMetrics:
    """Retrieves the singleton `PrometheusMetrics` instance."""
    global _metrics_instance
    if _metrics_instance is None:
        _metrics_instance = PrometheusMetrics()
    return _metrics_instance


# Helper functions for updating metrics from other modules
def record_check(signal: str, outcome: str, duration: float):
    """Counts a check and records how long it took."""
    DRIFT_CHECKS_TOTAL.labels(signal=signal, outcome=outcome).inc()
    DRIFT_DETECTION_DURATION.labels(signal=signal).observe(duration)


def record_detection(signal: str, severity: str):
    """Counts a computed check that detected drift."""
    DRIFT_DETECTIONS_TOTAL.labels(signal=signal, severity=severity).inc()


def record_scores(signal: str, average_score: float, scores: Mapping[str, float]):
    """Sets the latest aggregate and per-method scores."""
    DRIFT_AVERAGE_SCORE.labels(signal=signal).set(average_score)
    for method, score in scores.items():
        DRIFT_METHOD_SCORE.labels(signal=signal, method=method).set(score)


def record_engine_state(signal: str, cache_size: int, history_size: int):
    """Sets the cache and history size gauges."""
    DRIFT_RESULT_CACHE_SIZE.labels(signal=signal).set(cache_size)
    DRIFT_HISTORY_SIZE.labels(signal=signal).set(history_size)


def record_baseline_size(signal: str, size: int):
    """Sets the baseline size gauge."""
    DRIFT_BASELINE_SIZE.labels(signal=signal).set(size)
