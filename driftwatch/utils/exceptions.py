"""
Custom exception hierarchy for the drift detection engine.

This module defines the domain-specific exceptions raised by the engine. Every
exception carries a machine-readable error code and an optional context
payload so that downstream consumers can react to failures programmatically.
"""

from typing import Any, Optional

from driftwatch.utils.error_codes import ErrorCode, ErrorMessages


class DriftEngineError(Exception):
    """The base exception class for all errors raised by the engine.

    Attributes:
        code: A string-based error code for programmatic identification.
        context: Optional additional information about the error.
    """

    def __init__(self, message: str, code: str = "E0000", context: Optional[Any] = None):
        """Initializes the DriftEngineError.

        Args:
            message: A human-readable message describing the error.
            code: A unique, machine-readable code for the error.
            context: An optional dictionary for providing extra context.
        """
        super().__init__(message)
        self.code = code
        self.context = context


class ValidationError(DriftEngineError):
    """Raised when input samples or configuration values fail validation.

    Validation always happens before any engine state is mutated, so a failed
    call leaves the engine exactly as it was.
    """


class BaselineNotSetError(DriftEngineError):
    """Raised when drift detection is requested before a baseline exists."""

    def __init__(self, context: Optional[Any] = None):
        super().__init__(
            ErrorMessages.get_message(ErrorCode.BASELINE_NOT_SET),
            code=ErrorCode.BASELINE_NOT_SET.value,
            context=context,
        )


class DriftDetectionError(DriftEngineError):
    """Raised when a detection run fails for reasons other than bad input."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, code=ErrorCode.DRIFT_DETECTION_FAILED.value, context=context)


class SettingsValidationError(ValueError):
    """Raised for cross-field configuration inconsistencies.

    Subclasses `ValueError` so that pydantic validators surface it as a
    regular pydantic validation failure.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.code = ErrorCode.SETTINGS_VALIDATION_ERROR.value


class UnknownProfileError(DriftEngineError):
    """Raised when a configuration profile name is not registered."""

    def __init__(self, profile_name: str, available: Optional[list] = None):
        super().__init__(
            f"Unknown configuration profile '{profile_name}'",
            code=ErrorCode.UNKNOWN_PROFILE.value,
            context={"profile": profile_name, "available": available or []},
        )
