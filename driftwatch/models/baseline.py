"""Reference distribution model: values, summary statistics, and histograms."""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

import numpy as np

from driftwatch.services.histogram import STANDARD_BIN_COUNTS, HistogramCache
from driftwatch.utils.error_codes import ErrorCode, raise_validation_error
from driftwatch.utils.statistics import welford_stats


@dataclass(frozen=True)
class BaselineStatistics:
    """Single-pass summary of a baseline sample (population variance)."""

    mean: float
    std_dev: float
    variance: float
    min: float
    max: float
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mean": self.mean,
            "std_dev": self.std_dev,
            "variance": self.variance,
            "min": self.min,
            "max": self.max,
            "count": self.count,
        }


@dataclass(frozen=True)
class BaselineMetadata:
    """Descriptive metadata attached to a baseline."""

    version: Optional[str] = None
    description: Optional[str] = None
    source: Optional[str] = None
    tags: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_value(
        cls, metadata: Union["BaselineMetadata", Mapping[str, Any], None]
    ) -> "BaselineMetadata":
        """Coerces a mapping (or None) into metadata.

        Unknown mapping keys are kept under ``tags``.

        Raises:
            ValidationError: If ``metadata`` is neither a mapping nor metadata.
        """
        if metadata is None:
            return cls()
        if isinstance(metadata, cls):
            return metadata
        if not isinstance(metadata, Mapping):
            raise_validation_error(
                ErrorCode.INVALID_OPTION,
                f"metadata must be a mapping, got {type(metadata).__name__}",
                argument="metadata",
            )

        known = {"version", "description", "source", "tags"}
        tags = dict(metadata.get("tags") or {})
        tags.update({key: value for key, value in metadata.items() if key not in known})
        return cls(
            version=metadata.get("version"),
            description=metadata.get("description"),
            source=metadata.get("source"),
            tags=tags,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "description": self.description,
            "source": self.source,
            "tags": dict(self.tags),
        }


@dataclass(frozen=True)
class BaselineDistribution:
    """The reference sample that current data is compared against.

    Attributes:
        values: The validated sample as a read-only float64 array.
        sorted_values: Ascending copy of ``values``, built once.
        statistics: Mean, standard deviation, and range from one Welford pass.
        histograms: Normalized histograms over ``[min, max]`` for every
            standard bin count.
        metadata: Descriptive metadata.
        created_at: Creation time in epoch seconds.
    """

    values: np.ndarray
    sorted_values: np.ndarray
    statistics: BaselineStatistics
    histograms: HistogramCache
    metadata: BaselineMetadata = field(default_factory=BaselineMetadata)
    created_at: float = field(default_factory=time.time)

    @classmethod
    def from_values(
        cls,
        values: np.ndarray,
        metadata: Union[BaselineMetadata, Mapping[str, Any], None] = None,
    ) -> "BaselineDistribution":
        """Builds a baseline from an already validated float64 array.

        Args:
            values: Non-empty, finite, one-dimensional float64 array.
            metadata: Optional metadata mapping or `BaselineMetadata`.

        Returns:
            The fully populated baseline.
        """
        meta = BaselineMetadata.from_value(metadata)
        stats = welford_stats(values)
        statistics = BaselineStatistics(
            mean=stats.mean,
            std_dev=stats.std,
            variance=stats.variance,
            min=stats.min,
            max=stats.max,
            count=stats.count,
        )

        sorted_values = np.sort(values, kind="mergesort")
        sorted_values.setflags(write=False)

        histograms = HistogramCache(values, statistics.min, statistics.max, STANDARD_BIN_COUNTS)

        return cls(
            values=values,
            sorted_values=sorted_values,
            statistics=statistics,
            histograms=histograms,
            metadata=meta,
        )

    @property
    def size(self) -> int:
        return int(self.values.size)

    def to_dict(self) -> Dict[str, Any]:
        """Summary without the raw sample."""
        return {
            "statistics": self.statistics.to_dict(),
            "metadata": self.metadata.to_dict(),
            "bin_counts": list(self.histograms.bin_counts),
            "created_at": self.created_at,
        }
