"""
Equal-width histograms and the per-baseline histogram cache.

Histograms are stored as normalized frequencies (each sums to 1), so that
baselines and current samples of different sizes compare directly.
"""

from typing import Dict, Iterable, Optional

import numpy as np

STANDARD_BIN_COUNTS = (3, 5, 10, 20)


def adaptive_bin_count(min_sample_size: int) -> int:
    """Chooses a bin count that keeps bins populated for small samples.

    Args:
        min_sample_size: The smaller of the baseline and current sample sizes.

    Returns:
        One of the standard bin counts.
    """
    if min_sample_size < 10:
        return 3
    if min_sample_size < 50:
        return 5
    if min_sample_size < 200:
        return 10
    return 20


def build_histogram(values: np.ndarray, bins: int, lo: float, hi: float) -> np.ndarray:
    """Builds a normalized equal-width histogram over ``[lo, hi]``.

    Values outside the range are clamped into the first or last bin. When the
    range is degenerate (``lo == hi``) all mass lands in the first bin.

    Args:
        values: A non-empty one-dimensional float array.
        bins: Number of bins.
        lo: Lower edge of the range.
        hi: Upper edge of the range.

    Returns:
        A float64 array of length ``bins`` summing to 1.
    """
    # Halved so the span between extreme finite values cannot overflow.
    half_lo = lo / 2.0
    width = (hi / 2.0 - half_lo) / bins
    if hi <= lo or not width > 0:
        histogram = np.zeros(bins, dtype=np.float64)
        histogram[0] = 1.0
        return histogram

    positions = np.floor((values / 2.0 - half_lo) / width)
    indices = np.clip(positions, 0, bins - 1).astype(np.int64)
    counts = np.bincount(indices, minlength=bins)
    return counts / float(values.size)


class HistogramCache:
    """Precomputed baseline histograms keyed by bin count.

    Built once per baseline over the baseline's own ``[min, max]`` range. A
    cached histogram is only valid for comparisons made over that same range.
    """

    def __init__(
        self,
        values: np.ndarray,
        lo: float,
        hi: float,
        bin_counts: Iterable[int] = STANDARD_BIN_COUNTS,
    ):
        self.lo = float(lo)
        self.hi = float(hi)
        self._histograms: Dict[int, np.ndarray] = {}
        for bins in bin_counts:
            histogram = build_histogram(values, bins, self.lo, self.hi)
            histogram.setflags(write=False)
            self._histograms[bins] = histogram

    def get(self, bins: int) -> Optional[np.ndarray]:
        """Returns the cached histogram for ``bins``, if precomputed."""
        return self._histograms.get(bins)

    def lookup(self, bins: int, lo: float, hi: float) -> Optional[np.ndarray]:
        """Returns the cached histogram only when it was built over ``[lo, hi]``."""
        if lo != self.lo or hi != self.hi:
            return None
        return self._histograms.get(bins)

    @property
    def bin_counts(self) -> tuple:
        return tuple(sorted(self._histograms))

    def __contains__(self, bins: int) -> bool:
        return bins in self._histograms

    def __len__(self) -> int:
        return len(self._histograms)
