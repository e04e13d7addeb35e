"""
Input and configuration validation for the drift engine.

Every public entry point of the engine funnels its arguments through
`NumericValidator` before touching any state, which guarantees that a rejected
call never leaves the engine half-updated.
"""

import math
import numbers
from typing import Any

import numpy as np

from driftwatch.utils.error_codes import ErrorCode, raise_validation_error

_NUMERIC_KINDS = frozenset("iuf")


class NumericValidator:
    """Validates numeric samples and engine configuration bounds."""

    @staticmethod
    def validate_values(values: Any, name: str = "values") -> np.ndarray:
        """Validates a sample and returns it as a read-only float64 array.

        Args:
            values: A one-dimensional sequence or numpy array of real numbers.
            name: The argument name used in error messages.

        Returns:
            A contiguous, read-only float64 copy of the sample.

        Raises:
            ValidationError: If the sample is missing, empty, not a flat
                numeric sequence, or contains non-finite values.
        """
        if values is None or isinstance(values, (str, bytes, dict, set)):
            raise_validation_error(
                ErrorCode.INVALID_SEQUENCE,
                f"{name} must be a sequence of numbers, got {type(values).__name__}",
                argument=name,
            )

        if isinstance(values, np.ndarray):
            if values.ndim != 1:
                raise_validation_error(
                    ErrorCode.INVALID_SEQUENCE,
                    f"{name} must be one-dimensional, got {values.ndim} dimensions",
                    argument=name,
                )
            if values.dtype.kind not in _NUMERIC_KINDS:
                raise_validation_error(
                    ErrorCode.NON_NUMERIC_VALUE,
                    f"{name} must hold real numbers, got dtype {values.dtype}",
                    argument=name,
                )
            array = values.astype(np.float64, copy=True)
        else:
            try:
                items = list(values)
            except TypeError:
                raise_validation_error(
                    ErrorCode.INVALID_SEQUENCE,
                    f"{name} must be a sequence of numbers, got {type(values).__name__}",
                    argument=name,
                )
            for index, value in enumerate(items):
                if isinstance(value, bool) or not isinstance(value, numbers.Real):
                    raise_validation_error(
                        ErrorCode.NON_NUMERIC_VALUE,
                        f"Invalid value at index {index}: {value!r}. All values must be finite numbers.",
                        argument=name,
                        index=index,
                    )
            array = np.asarray(items, dtype=np.float64)

        if array.size == 0:
            raise_validation_error(
                ErrorCode.EMPTY_VALUES, f"{name} cannot be empty", argument=name
            )

        finite = np.isfinite(array)
        if not finite.all():
            index = int(np.argmin(finite))
            raise_validation_error(
                ErrorCode.NON_FINITE_VALUE,
                f"Invalid value at index {index}: {array[index]}. All values must be finite numbers.",
                argument=name,
                index=index,
            )

        array.setflags(write=False)
        return array

    @staticmethod
    def validate_threshold(value: Any, name: str = "drift_threshold") -> float:
        """Ensures a threshold lies in the half-open interval (0, 1]."""
        if (
            isinstance(value, bool)
            or not isinstance(value, numbers.Real)
            or not math.isfinite(value)
            or not 0 < value <= 1
        ):
            raise_validation_error(
                ErrorCode.INVALID_THRESHOLD,
                f"{name} must be between 0 (exclusive) and 1 (inclusive), got {value!r}",
                argument=name,
            )
        return float(value)

    @staticmethod
    def validate_positive_int(value: Any, name: str) -> int:
        """Ensures a size or window limit is a positive integer."""
        if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
            raise_validation_error(
                ErrorCode.NON_POSITIVE_LIMIT,
                f"{name} must be a positive integer, got {value!r}",
                argument=name,
            )
        return int(value)

    @classmethod
    def validate_engine_config(cls, config) -> None:
        """Re-checks the bounds of an `EngineConfig`.

        Pydantic enforces the same bounds at construction time; this guards
        configs built with `model_construct()` or mutated after creation.
        """
        cls.validate_threshold(config.drift_threshold)
        for field_name in (
            "max_history_size",
            "max_cache_size",
            "prediction_window",
            "recency_window",
            "trend_window",
        ):
            cls.validate_positive_int(getattr(config, field_name), field_name)
        if not 0 < config.sampling_tolerance < 1:
            raise_validation_error(
                ErrorCode.INVALID_OPTION,
                f"sampling_tolerance must be between 0 and 1, got {config.sampling_tolerance!r}",
                argument="sampling_tolerance",
            )
