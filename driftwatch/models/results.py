"""
Detection, history, and prediction result types.

A detection call returns one of three variants, each tagged with ``kind``:

- `ComputedResult`: all four methods were evaluated.
- `SkippedResult`: the sample was statistically indistinguishable from the
  last computed one, so the prior result is reported again.
- `CachedResult`: the exact same sample was seen before and its memoized
  result is returned.

History holds computed and skipped results, plus `CompressedEntry` records
for entries that have aged out of the recency window.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Union


class Severity(str, Enum):
    """Drift severity, ordered from least to most severe."""

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class DriftMethod(str, Enum):
    """Divergence methods evaluated on every full check."""

    PSI = "psi"
    KS = "ks"
    JSD = "jsd"
    STATISTICAL = "statistical"


class Prediction(str, Enum):
    """Outcome of a drift trend forecast."""

    DRIFT_LIKELY = "drift_likely"
    STABLE = "stable"
    INSUFFICIENT_DATA = "insufficient_data"


@dataclass(frozen=True)
class QuickStats:
    """Mean and population standard deviation of a current sample."""

    mean: float
    std_dev: float

    def to_dict(self) -> Dict[str, float]:
        return {"mean": self.mean, "std_dev": self.std_dev}


@dataclass(frozen=True)
class DetectionOptions:
    """Per-call switches for the detection short-circuits.

    Attributes:
        adaptive_sampling: Allow skipping when the sample barely changed.
        memoization: Allow answering from (and storing into) the result cache.
    """

    adaptive_sampling: bool = True
    memoization: bool = True


@dataclass(frozen=True)
class ComputedResult:
    """Outcome of a full detection run."""

    kind: ClassVar[str] = "computed"

    is_drift: bool
    severity: Severity
    scores: Dict[str, float]
    average_score: float
    primary_method: DriftMethod
    quick_stats: QuickStats
    effective_threshold: float
    sample_size: int
    timestamp: float = field(default_factory=time.time)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "is_drift": self.is_drift,
            "severity": self.severity.value,
            "scores": dict(self.scores),
            "average_score": self.average_score,
            "primary_method": self.primary_method.value,
            "quick_stats": self.quick_stats.to_dict(),
            "effective_threshold": self.effective_threshold,
            "sample_size": self.sample_size,
            "timestamp": self.timestamp,
        }


class _DelegatingResult:
    """Exposes the wrapped computed result's outcome fields."""

    @property
    def computed(self) -> ComputedResult:
        raise NotImplementedError

    @property
    def is_drift(self) -> bool:
        return self.computed.is_drift

    @property
    def severity(self) -> Severity:
        return self.computed.severity

    @property
    def scores(self) -> Dict[str, float]:
        return self.computed.scores

    @property
    def average_score(self) -> float:
        return self.computed.average_score


@dataclass(frozen=True)
class SkippedResult(_DelegatingResult):
    """A check answered with the last computed result."""

    kind: ClassVar[str] = "skipped"

    prior_result: ComputedResult
    reason: str
    timestamp: float = field(default_factory=time.time)

    @property
    def computed(self) -> ComputedResult:
        return self.prior_result

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "reason": self.reason,
            "timestamp": self.timestamp,
            "prior_result": self.prior_result.to_dict(),
        }


@dataclass(frozen=True)
class CachedResult(_DelegatingResult):
    """A check answered from the memoization cache."""

    kind: ClassVar[str] = "cached"

    result: ComputedResult
    timestamp: float = field(default_factory=time.time)

    @property
    def computed(self) -> ComputedResult:
        return self.result

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "timestamp": self.timestamp,
            "result": self.result.to_dict(),
        }


@dataclass(frozen=True)
class CompressedEntry:
    """Compact history record without per-method scores."""

    kind: ClassVar[str] = "compressed"

    timestamp: float
    is_drift: bool
    severity: Severity
    average_score: float

    @classmethod
    def from_entry(cls, entry: Union[ComputedResult, SkippedResult]) -> "CompressedEntry":
        return cls(
            timestamp=entry.timestamp,
            is_drift=entry.is_drift,
            severity=entry.severity,
            average_score=entry.average_score,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "timestamp": self.timestamp,
            "is_drift": self.is_drift,
            "severity": self.severity.value,
            "average_score": self.average_score,
        }


DriftResult = Union[ComputedResult, SkippedResult, CachedResult]
HistoryEntry = Union[ComputedResult, SkippedResult, CompressedEntry]


@dataclass(frozen=True)
class PredictionResult:
    """Linear-trend forecast of the aggregate drift score."""

    prediction: Prediction
    confidence: float
    trend_slope: float
    projected_score: Optional[float]
    periods_ahead: int
    samples_used: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "prediction": self.prediction.value,
            "confidence": self.confidence,
            "trend_slope": self.trend_slope,
            "projected_score": self.projected_score,
            "periods_ahead": self.periods_ahead,
            "samples_used": self.samples_used,
        }


@dataclass(frozen=True)
class EngineStatistics:
    """Counters describing an engine's activity since creation or reset."""

    total_checks: int
    drift_detected: int
    checks_skipped: int
    cache_hits: int
    drift_rate: float
    cache_size: int
    history_size: int
    uptime_seconds: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_checks": self.total_checks,
            "drift_detected": self.drift_detected,
            "checks_skipped": self.checks_skipped,
            "cache_hits": self.cache_hits,
            "drift_rate": self.drift_rate,
            "cache_size": self.cache_size,
            "history_size": self.history_size,
            "uptime_seconds": self.uptime_seconds,
        }
