"""
Interface for Drift Engine

Defines the contract for baseline-versus-current drift detection engines.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional, Sequence

from driftwatch.models.baseline import BaselineDistribution
from driftwatch.models.results import (
    DetectionOptions,
    DriftResult,
    EngineStatistics,
    HistoryEntry,
    PredictionResult,
)


class IDriftEngine(ABC):
    """
    Interface for drift detection engines.

    One engine monitors one signal: it holds a baseline, compares current
    samples against it, and keeps a history of outcomes.
    """

    @abstractmethod
    def set_baseline(
        self, values: Sequence[float], metadata: Optional[Mapping[str, Any]] = None
    ) -> BaselineDistribution:
        """
        Replace the reference distribution.

        Args:
            values: Non-empty sequence of finite numbers
            metadata: Optional descriptive metadata

        Returns:
            The new baseline

        Raises:
            ValidationError: If values are empty, non-numeric, or non-finite
        """
        pass

    @abstractmethod
    def detect_drift(
        self, current: Sequence[float], options: Optional[DetectionOptions] = None
    ) -> DriftResult:
        """
        Compare a current sample against the baseline.

        Args:
            current: Non-empty sequence of finite numbers
            options: Per-call sampling and memoization switches

        Returns:
            A computed, skipped, or cached result

        Raises:
            ValidationError: If current is invalid
            BaselineNotSetError: If no baseline has been set
        """
        pass

    @abstractmethod
    def predict_drift(self, periods_ahead: Optional[int] = None) -> PredictionResult:
        """
        Forecast the drift score trend.

        Args:
            periods_ahead: Checks to extrapolate over (defaults to the
                configured prediction window)

        Returns:
            The forecast

        Raises:
            ValidationError: If periods_ahead is not a positive integer
        """
        pass

    @abstractmethod
    def get_history(self) -> List[HistoryEntry]:
        """Snapshot of the detection history, oldest first."""
        pass

    @abstractmethod
    def get_statistics(self) -> EngineStatistics:
        """Activity counters since creation or the last reset."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Drop the baseline, caches, history, and counters."""
        pass
