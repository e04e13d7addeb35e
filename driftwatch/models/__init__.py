"""Data models for baselines, detection results, and predictions."""

from driftwatch.models.baseline import BaselineDistribution, BaselineMetadata, BaselineStatistics
from driftwatch.models.results import (
    CachedResult,
    CompressedEntry,
    ComputedResult,
    DetectionOptions,
    DriftMethod,
    DriftResult,
    EngineStatistics,
    HistoryEntry,
    Prediction,
    PredictionResult,
    QuickStats,
    Severity,
    SkippedResult,
)

__all__ = [
    "BaselineDistribution",
    "BaselineMetadata",
    "BaselineStatistics",
    "CachedResult",
    "CompressedEntry",
    "ComputedResult",
    "DetectionOptions",
    "DriftMethod",
    "DriftResult",
    "EngineStatistics",
    "HistoryEntry",
    "Prediction",
    "PredictionResult",
    "QuickStats",
    "Severity",
    "SkippedResult",
]
