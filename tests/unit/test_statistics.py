"""Tests for the single-pass statistics helpers."""

import math

import numpy as np
import pytest

from driftwatch.utils.statistics import RunningStats, quick_stats, welford_stats


@pytest.mark.unit
class TestRunningStats:
    """Tests for the Welford accumulator."""

    def test_known_sample(self):
        stats = welford_stats([1.0, 2.0, 3.0, 4.0, 5.0])

        assert stats.count == 5
        assert stats.mean == pytest.approx(3.0)
        assert stats.variance == pytest.approx(2.0)
        assert stats.std == pytest.approx(math.sqrt(2.0))
        assert stats.min == 1.0
        assert stats.max == 5.0

    def test_single_value_has_zero_variance(self):
        stats = RunningStats()
        stats.update(7.5)

        assert stats.mean == 7.5
        assert stats.variance == 0.0
        assert stats.min == stats.max == 7.5

    def test_empty_accumulator(self):
        stats = RunningStats()
        assert stats.count == 0
        assert stats.std == 0.0
        assert stats.min is None

    def test_matches_numpy_population_statistics(self, rng):
        values = rng.normal(100.0, 15.0, size=2000)
        stats = welford_stats(values)

        assert stats.mean == pytest.approx(np.mean(values), rel=1e-12)
        assert stats.variance == pytest.approx(np.var(values), rel=1e-9)
        assert stats.min == values.min()
        assert stats.max == values.max()

    def test_large_offset_stays_stable(self):
        values = [1e9 + x for x in (4.0, 7.0, 13.0, 16.0)]
        assert welford_stats(values).variance == pytest.approx(22.5)

    def test_quick_stats(self):
        mean, std_dev = quick_stats(np.array([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]))
        assert mean == pytest.approx(5.0)
        assert std_dev == pytest.approx(2.0)

    def test_ordinary_samples_are_not_rescaled(self):
        assert welford_stats([1.0, 2.0, 3.0]).scale == 1.0

    def test_extreme_values_keep_finite_moments(self):
        stats = welford_stats([1e308, -1e308])

        assert stats.scale > 1.0
        assert stats.mean == 0.0
        assert stats.std == pytest.approx(1e308)
        assert stats.min == -1e308
        assert stats.max == 1e308

    def test_rescaled_sample_matches_exact_moments(self):
        stats = welford_stats(np.array([3e200, 5e200, 7e200]))

        assert stats.mean == pytest.approx(5e200, rel=1e-12)
        assert stats.std == pytest.approx(math.sqrt(8.0 / 3.0) * 1e200, rel=1e-12)
        assert math.isinf(stats.variance)
