"""
Divergence methods comparing a baseline against a current sample.

Every method is a pure function ``(baseline, current) -> float`` that returns
a finite, non-negative score, so the four methods can be evaluated in any
order:

- PSI (Population Stability Index) over adaptive equal-width bins
- KS (Kolmogorov-Smirnov) statistic via a linear merge of sorted samples
- JSD (Jensen-Shannon divergence) over the same bins as PSI
- Statistical: normalized shift of mean and standard deviation
"""

import math
import sys
from functools import partial
from typing import Callable, Dict, Optional, Tuple

import numpy as np

from driftwatch.models.baseline import BaselineDistribution
from driftwatch.models.results import DriftMethod, QuickStats
from driftwatch.services.histogram import adaptive_bin_count, build_histogram
from driftwatch.utils.exceptions import DriftDetectionError
from driftwatch.utils.statistics import quick_stats

EPSILON = 0.005
MAX_SCORE = sys.float_info.max

DriftMethodFn = Callable[[BaselineDistribution, np.ndarray], float]


def _histogram_pair(
    baseline: BaselineDistribution, current: np.ndarray
) -> Tuple[np.ndarray, np.ndarray]:
    """Baseline and current histograms over the combined range.

    The precomputed baseline histogram is reused when the current sample lies
    within the baseline range, since the combined range is then unchanged.
    """
    bins = adaptive_bin_count(min(baseline.size, int(current.size)))
    lo = min(baseline.statistics.min, float(current.min()))
    hi = max(baseline.statistics.max, float(current.max()))

    base_hist = baseline.histograms.lookup(bins, lo, hi)
    if base_hist is None:
        base_hist = build_histogram(baseline.values, bins, lo, hi)
    cur_hist = build_histogram(current, bins, lo, hi)
    return base_hist, cur_hist


def population_stability_index(baseline: BaselineDistribution, current: np.ndarray) -> float:
    """PSI = sum((c - b) * ln((c + eps) / (b + eps))) over shared bins."""
    base_hist, cur_hist = _histogram_pair(baseline, current)
    psi = np.sum((cur_hist - base_hist) * np.log((cur_hist + EPSILON) / (base_hist + EPSILON)))
    return float(psi)


def ks_statistic_sorted(sorted_a: np.ndarray, sorted_b: np.ndarray) -> float:
    """Two-sample KS statistic of two ascending samples in O(n + m).

    Each step consumes every element equal to the smaller head value from
    both samples before comparing the empirical CDFs, so tied values are
    counted together. Once either sample is exhausted its CDF is 1 and the
    gap can only shrink, which ends the scan.

    Args:
        sorted_a: First sample, ascending.
        sorted_b: Second sample, ascending.

    Returns:
        The maximum absolute difference between the two empirical CDFs.
    """
    a = sorted_a.tolist()
    b = sorted_b.tolist()
    n, m = len(a), len(b)
    if n == 0 or m == 0:
        return 0.0

    i = j = 0
    max_diff = 0.0
    while i < n and j < m:
        value = a[i] if a[i] <= b[j] else b[j]
        while i < n and a[i] <= value:
            i += 1
        while j < m and b[j] <= value:
            j += 1
        diff = abs(i / n - j / m)
        if diff > max_diff:
            max_diff = diff
    return max_diff


def kolmogorov_smirnov(baseline: BaselineDistribution, current: np.ndarray) -> float:
    """KS statistic between the baseline and the current sample."""
    return ks_statistic_sorted(baseline.sorted_values, np.sort(current, kind="mergesort"))


def jensen_shannon_divergence(baseline: BaselineDistribution, current: np.ndarray) -> float:
    """JSD over shared bins, using epsilon-smoothed renormalized histograms."""
    base_hist, cur_hist = _histogram_pair(baseline, current)

    p = base_hist + EPSILON
    p = p / p.sum()
    q = cur_hist + EPSILON
    q = q / q.sum()
    m = (p + q) / 2.0

    kl_pm = np.sum(p * np.log(p / m))
    kl_qm = np.sum(q * np.log(q / m))
    return max(0.0, float(0.5 * kl_pm + 0.5 * kl_qm))


def statistical_shift(
    baseline: BaselineDistribution,
    current: np.ndarray,
    current_stats: Optional[QuickStats] = None,
) -> float:
    """Average of the mean shift and std shift, in baseline standard deviations.

    Args:
        baseline: The reference distribution.
        current: The current sample.
        current_stats: Mean and std of ``current`` when already known.

    Returns:
        The shift score, capped at the largest finite float.
    """
    if current_stats is None:
        cur_mean, cur_std = quick_stats(current)
    else:
        cur_mean, cur_std = current_stats.mean, current_stats.std_dev
    base_mean = baseline.statistics.mean
    base_std = baseline.statistics.std_dev

    mean_drift = abs(cur_mean - base_mean) / (base_std + EPSILON)
    std_drift = abs(cur_std - base_std) / (base_std + EPSILON)
    return min((mean_drift + std_drift) / 2.0, MAX_SCORE)


DRIFT_METHODS: Dict[DriftMethod, DriftMethodFn] = {
    DriftMethod.PSI: population_stability_index,
    DriftMethod.KS: kolmogorov_smirnov,
    DriftMethod.JSD: jensen_shannon_divergence,
    DriftMethod.STATISTICAL: statistical_shift,
}


def _checked(method: DriftMethod, value: float) -> float:
    if not math.isfinite(value) or value < 0:
        raise DriftDetectionError(
            f"{method.value} produced an invalid score: {value!r}",
            context={"method": method.value, "score": value},
        )
    return float(value)


def compute_scores(
    baseline: BaselineDistribution,
    current: np.ndarray,
    current_stats: Optional[QuickStats] = None,
) -> Dict[str, float]:
    """Evaluates every drift method on the same pair of samples, in order.

    Args:
        baseline: The reference distribution.
        current: The validated current sample.
        current_stats: Mean and std of ``current``, reused by the statistical
            method instead of another pass over the sample.

    Returns:
        Scores keyed by method name ('psi', 'ks', 'jsd', 'statistical').

    Raises:
        DriftDetectionError: If a method yields a non-finite or negative score.
    """
    methods = dict(DRIFT_METHODS)
    if current_stats is not None:
        methods[DriftMethod.STATISTICAL] = partial(statistical_shift, current_stats=current_stats)

    raw = {method: fn(baseline, current) for method, fn in methods.items()}

    return {method.value: _checked(method, score) for method, score in raw.items()}
