"""Tests for the four drift scoring methods."""

import math

import numpy as np
import pytest
from scipy import stats

from driftwatch.models.baseline import BaselineDistribution
from driftwatch.models.results import QuickStats
from driftwatch.services.drift_methods import (
    DRIFT_METHODS,
    MAX_SCORE,
    compute_scores,
    jensen_shannon_divergence,
    kolmogorov_smirnov,
    ks_statistic_sorted,
    population_stability_index,
    statistical_shift,
)
from driftwatch.utils.statistics import quick_stats
from driftwatch.utils.validation import NumericValidator
from tests.fixtures.common_fixtures import DRIFT_BASELINE, DRIFTED_CURRENT


def _baseline(values):
    return BaselineDistribution.from_values(NumericValidator.validate_values(values))


def _array(values):
    return NumericValidator.validate_values(values)


def brute_force_ks(a, b):
    """Reference KS statistic evaluating both ECDFs at every observed value."""
    a = np.sort(np.asarray(a, dtype=float))
    b = np.sort(np.asarray(b, dtype=float))
    points = np.concatenate([a, b])
    cdf_a = np.searchsorted(a, points, side="right") / a.size
    cdf_b = np.searchsorted(b, points, side="right") / b.size
    return float(np.max(np.abs(cdf_a - cdf_b)))


@pytest.mark.unit
class TestIdentity:
    """Comparing a sample with itself yields zero divergence."""

    @pytest.mark.parametrize(
        "values",
        [
            DRIFT_BASELINE,
            [1.0],
            [3.0, 3.0, 3.0],
            [0.0, 0.0, 1.0, 1.0, 1.0, 2.0],
            list(np.linspace(-50, 50, 333)),
        ],
    )
    def test_all_methods_score_zero(self, values):
        baseline = _baseline(values)
        current = _array(values)

        assert population_stability_index(baseline, current) == 0.0
        assert kolmogorov_smirnov(baseline, current) == 0.0
        assert jensen_shannon_divergence(baseline, current) == 0.0
        assert statistical_shift(baseline, current) == 0.0

    def test_random_sample_scores_zero(self, rng):
        values = rng.normal(size=1000)
        scores = compute_scores(_baseline(values), _array(values))
        assert scores == {"psi": 0.0, "ks": 0.0, "jsd": 0.0, "statistical": 0.0}


@pytest.mark.unit
class TestKnownShift:
    """Scores for a fully separated pair of small samples."""

    def test_psi_and_ks(self):
        baseline = _baseline(DRIFT_BASELINE)
        current = _array(DRIFTED_CURRENT)

        # Shared range [0.1, 0.9] with 3 bins: baseline [0, .4, .6], current [.6, .4, 0].
        expected_psi = 2 * 0.6 * math.log(0.605 / 0.005)
        assert population_stability_index(baseline, current) == pytest.approx(expected_psi)
        assert kolmogorov_smirnov(baseline, current) == pytest.approx(0.8)

    def test_statistical_shift(self):
        baseline = _baseline(DRIFT_BASELINE)
        current = _array(DRIFTED_CURRENT)

        base_std = baseline.statistics.std_dev
        expected = (0.4 / (base_std + 0.005)) / 2
        assert statistical_shift(baseline, current) == pytest.approx(expected)

    def test_jsd_is_positive_and_bounded(self):
        jsd = jensen_shannon_divergence(_baseline(DRIFT_BASELINE), _array(DRIFTED_CURRENT))
        assert 0.0 < jsd <= math.log(2)


@pytest.mark.unit
class TestKolmogorovSmirnov:
    """Differential tests of the linear-time KS scan."""

    @pytest.mark.parametrize("seed", range(20))
    def test_matches_brute_force_with_ties(self, seed):
        rng = np.random.default_rng(seed)
        a = rng.integers(0, 15, size=rng.integers(1, 300)).astype(float)
        b = rng.integers(3, 20, size=rng.integers(1, 300)).astype(float)

        result = ks_statistic_sorted(np.sort(a), np.sort(b))

        assert result == pytest.approx(brute_force_ks(a, b), abs=1e-12)
        assert result == pytest.approx(stats.ks_2samp(a, b).statistic, abs=1e-12)

    @pytest.mark.parametrize("seed", range(5))
    def test_matches_scipy_on_continuous_samples(self, seed):
        rng = np.random.default_rng(100 + seed)
        a = rng.normal(0.0, 1.0, size=2000)
        b = rng.normal(0.2, 1.3, size=1500)

        result = ks_statistic_sorted(np.sort(a), np.sort(b))
        assert result == pytest.approx(stats.ks_2samp(a, b).statistic, abs=1e-12)

    def test_disjoint_samples(self):
        assert ks_statistic_sorted(np.array([1.0, 2.0]), np.array([5.0, 6.0, 7.0])) == 1.0

    def test_is_symmetric(self, rng):
        a = np.sort(rng.normal(size=50))
        b = np.sort(rng.normal(0.5, size=80))
        assert ks_statistic_sorted(a, b) == ks_statistic_sorted(b, a)


@pytest.mark.unit
class TestScoreInvariants:
    """All scores are finite and non-negative."""

    @pytest.mark.parametrize(
        "baseline_values,current_values",
        [
            ([5.0] * 20, [5.0, 6.0, 7.0]),
            ([1.0, 2.0, 3.0], [1000.0] * 4),
            ([0.0], [1e-300, 2e-300]),
            ([-1e6, 1e6], [0.0]),
        ],
    )
    def test_edge_cases_stay_finite(self, baseline_values, current_values):
        scores = compute_scores(_baseline(baseline_values), _array(current_values))

        assert set(scores) == {"psi", "ks", "jsd", "statistical"}
        for score in scores.values():
            assert math.isfinite(score)
            assert score >= 0.0

    def test_current_outside_baseline_range_uses_combined_range(self):
        baseline = _baseline([1.0, 2.0, 3.0, 4.0])
        psi = population_stability_index(baseline, _array([3.5, 4.5, 5.5]))
        assert psi > 0.0

    @pytest.mark.parametrize(
        "baseline_values,current_values",
        [
            ([1e308, -1e308], [0.0, 1.0]),
            ([1e200, -1e200, 0.0], [1.0, 2.0, 3.0]),
            ([0.0, 0.0], [1.7e308, 1.7e308]),
            ([-1.7e308], [1.7e308]),
        ],
    )
    def test_extreme_magnitudes_stay_finite(self, baseline_values, current_values):
        scores = compute_scores(_baseline(baseline_values), _array(current_values))

        for score in scores.values():
            assert math.isfinite(score)
            assert score >= 0.0

    def test_statistical_shift_is_capped(self):
        score = statistical_shift(_baseline([0.0, 0.0]), _array([1.7e308, 1.7e308]))
        assert score == MAX_SCORE

    def test_precomputed_current_stats_give_same_scores(self):
        baseline = _baseline(DRIFT_BASELINE)
        current = _array(DRIFTED_CURRENT)
        mean, std_dev = quick_stats(current)

        precomputed = compute_scores(baseline, current, QuickStats(mean=mean, std_dev=std_dev))

        assert precomputed == compute_scores(baseline, current)

    def test_statistical_shift_reads_given_stats(self):
        baseline = _baseline([0.0, 2.0])
        current = _array([0.0, 2.0])

        assert statistical_shift(baseline, current) == 0.0
        shifted = statistical_shift(baseline, current, QuickStats(mean=2.0, std_dev=1.0))
        assert shifted == pytest.approx(0.5 / 1.005)

    def test_every_method_is_registered(self):
        assert {method.value for method in DRIFT_METHODS} == {"psi", "ks", "jsd", "statistical"}
