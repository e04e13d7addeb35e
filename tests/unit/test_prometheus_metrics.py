"""Tests for Prometheus metric emission."""

import pytest
from prometheus_client import REGISTRY

from driftwatch.monitoring.prometheus import PrometheusMetrics, get_metrics
from driftwatch.services.drift_engine import DriftEngine
from tests.fixtures.common_fixtures import DRIFT_BASELINE, DRIFTED_CURRENT


def _sample(name, **labels):
    return REGISTRY.get_sample_value(name, labels)


@pytest.mark.unit
class TestDriftMetrics:
    """Tests for metrics recorded by the engine."""

    def test_checks_are_counted_by_outcome(self):
        engine = DriftEngine(signal="metrics-outcomes")
        engine.set_baseline(DRIFT_BASELINE)
        engine.detect_drift(DRIFTED_CURRENT)
        engine.detect_drift(DRIFTED_CURRENT)

        assert _sample("drift_checks_total", signal="metrics-outcomes", outcome="computed") == 1
        assert _sample("drift_checks_total", signal="metrics-outcomes", outcome="cached") == 1
        assert _sample("drift_baseline_size", signal="metrics-outcomes") == 5
        assert _sample("drift_result_cache_size", signal="metrics-outcomes") == 1
        assert _sample("drift_history_size", signal="metrics-outcomes") == 1

    def test_scores_and_detections(self):
        engine = DriftEngine(signal="metrics-scores")
        engine.set_baseline(DRIFT_BASELINE)
        result = engine.detect_drift(DRIFTED_CURRENT)

        assert _sample("drift_average_score", signal="metrics-scores") == pytest.approx(
            result.average_score
        )
        assert _sample("drift_method_score", signal="metrics-scores", method="ks") == pytest.approx(
            result.scores["ks"]
        )
        assert (
            _sample(
                "drift_detections_total",
                signal="metrics-scores",
                severity=result.severity.value,
            )
            == 1
        )
        assert _sample("drift_detection_duration_seconds_count", signal="metrics-scores") == 1

    def test_metrics_can_be_disabled(self):
        engine = DriftEngine(signal="metrics-disabled", enable_metrics=False)
        engine.set_baseline(DRIFT_BASELINE)
        engine.detect_drift(DRIFTED_CURRENT)

        assert _sample("drift_checks_total", signal="metrics-disabled", outcome="computed") is None


@pytest.mark.unit
class TestPrometheusMetrics:
    """Tests for the exposition payload."""

    def test_payload_contains_drift_metrics(self):
        payload = PrometheusMetrics().get_metrics()

        assert b"drift_checks_total" in payload
        assert b"driftwatch_engine_info" in payload

    def test_payload_is_cached_within_ttl(self):
        metrics = PrometheusMetrics()
        assert metrics.get_metrics() is metrics.get_metrics()

    def test_content_type(self):
        assert PrometheusMetrics.get_metrics_content_type().startswith("text/plain")

    def test_singleton(self):
        assert get_metrics() is get_metrics()
