"""
Single-pass descriptive statistics.

Implements Welford's algorithm for numerically stable running mean and
variance, tracking the range in the same pass. Used for baseline summaries,
the adaptive sampler's quick statistics, and the statistical drift method.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

# Samples whose largest magnitude exceeds this are accumulated in scaled
# units, so squared deviations of extreme finite values cannot overflow.
RESCALE_ABOVE = 1e150


@dataclass
class RunningStats:
    """Accumulates mean, population variance, and range one value at a time.

    Attributes:
        count: Number of values seen.
        mean: Running mean.
        m2: Sum of squared deviations from the running mean, in units of
            ``scale`` squared.
        min: Smallest value seen, or None before the first update.
        max: Largest value seen, or None before the first update.
        scale: Power of two every value is divided by before accumulating.
    """

    count: int = 0
    mean: float = 0.0
    m2: float = 0.0
    min: Optional[float] = None
    max: Optional[float] = None
    scale: float = 1.0

    def update(self, value: float) -> None:
        """Folds a single value into the running statistics."""
        scaled = value / self.scale
        scaled_mean = self.mean / self.scale
        self.count += 1
        delta = scaled - scaled_mean
        scaled_mean += delta / self.count
        self.m2 += delta * (scaled - scaled_mean)
        self.mean = scaled_mean * self.scale

        if self.min is None or value < self.min:
            self.min = value
        if self.max is None or value > self.max:
            self.max = value

    def update_many(self, values: Iterable[float]) -> "RunningStats":
        """Folds every value of an iterable, returning self for chaining."""
        for value in values:
            self.update(value)
        return self

    @property
    def variance(self) -> float:
        """Population variance (zero for fewer than two values).

        Overflows to inf when the standard deviation exceeds about 1e154.
        """
        if self.count < 2:
            return 0.0
        return self.m2 / self.count * self.scale * self.scale

    @property
    def std(self) -> float:
        """Population standard deviation."""
        if self.count < 2:
            return 0.0
        return math.sqrt(self.m2 / self.count) * self.scale


def scale_for(peak: float) -> float:
    """Power of two that brings ``peak`` below 2 in magnitude, or 1.0 when not needed."""
    if not peak > RESCALE_ABOVE:
        return 1.0
    return math.ldexp(1.0, math.frexp(peak)[1] - 1)


def welford_stats(values) -> RunningStats:
    """Computes mean, variance, and range of a sample in one pass.

    Args:
        values: A one-dimensional numpy array or sequence of floats.

    Returns:
        The populated `RunningStats` accumulator.
    """
    # tolist() hands back Python floats, which the loop handles far faster
    # than numpy scalars.
    items = values.tolist() if hasattr(values, "tolist") else list(values)
    peak = max((abs(value) for value in items), default=0.0)
    return RunningStats(scale=scale_for(peak)).update_many(items)


def quick_stats(values) -> Tuple[float, float]:
    """Returns the mean and population standard deviation of a sample.

    Args:
        values: A one-dimensional numpy array or sequence of floats.

    Returns:
        A `(mean, std_dev)` tuple.
    """
    stats = welford_stats(values)
    return stats.mean, stats.std
