"""Prometheus metrics for drift detection."""

from driftwatch.monitoring.prometheus import PrometheusMetrics, get_metrics

__all__ = ["PrometheusMetrics", "get_metrics"]
