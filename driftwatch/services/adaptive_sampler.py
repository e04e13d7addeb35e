"""
Adaptive sampling: skip full detection when the sample barely changed.

After each full check the sampler remembers the result and the sample's mean
and standard deviation. A later sample whose mean and standard deviation are
both within a relative tolerance of those values is answered with the
remembered result instead of re-running every method.
"""

from typing import Optional

import numpy as np

from driftwatch.models.results import ComputedResult, QuickStats
from driftwatch.utils.statistics import quick_stats

SKIP_REASON = "Quick statistics within {tolerance:.0%} of the last full check"


class AdaptiveSampler:
    """Tracks the last full check and decides whether a new one can be skipped."""

    def __init__(self, tolerance: float = 0.05):
        self.tolerance = tolerance
        self._last_stats: Optional[QuickStats] = None
        self._last_result: Optional[ComputedResult] = None

    @staticmethod
    def quick_stats(values: np.ndarray) -> QuickStats:
        """Mean and population standard deviation in one pass."""
        mean, std_dev = quick_stats(values)
        return QuickStats(mean=mean, std_dev=std_dev)

    @property
    def last_result(self) -> Optional[ComputedResult]:
        return self._last_result

    @property
    def reason(self) -> str:
        return SKIP_REASON.format(tolerance=self.tolerance)

    def is_similar(self, stats: QuickStats) -> bool:
        """Whether ``stats`` is within tolerance of the last full check."""
        last = self._last_stats
        if last is None:
            return False

        mean_change = abs(stats.mean - last.mean) / (abs(last.mean) or 1.0)
        std_change = abs(stats.std_dev - last.std_dev) / (last.std_dev or 1.0)
        return mean_change < self.tolerance and std_change < self.tolerance

    def check(self, stats: QuickStats) -> Optional[ComputedResult]:
        """Returns the prior result to reuse, or None when a full check is needed."""
        if self._last_result is not None and self.is_similar(stats):
            return self._last_result
        return None

    def record(self, result: ComputedResult) -> None:
        """Remembers a full check as the new reference point."""
        self._last_stats = result.quick_stats
        self._last_result = result

    def reset(self) -> None:
        self._last_stats = None
        self._last_result = None
