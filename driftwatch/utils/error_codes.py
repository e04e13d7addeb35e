"""
Standardized error codes for the drift detection engine.

This module establishes a centralized and consistent error vocabulary for the
engine. It defines standardized error codes, human-readable messages, and
utility functions for building structured error payloads and raising the
engine's own exceptions, so callers always receive predictable error
information.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Defines standardized error codes for the engine.

    Error Code Ranges:
    - 1000-1099: Input validation errors
    - 2000-2099: Baseline errors
    - 3000-3099: Detection errors
    - 5000-5099: Configuration errors
    """

    # Input validation errors (1000-1099)
    EMPTY_VALUES = "E1001"
    INVALID_SEQUENCE = "E1002"
    NON_NUMERIC_VALUE = "E1003"
    NON_FINITE_VALUE = "E1004"
    INVALID_THRESHOLD = "E1005"
    NON_POSITIVE_LIMIT = "E1006"
    INVALID_OPTION = "E1007"

    # Baseline errors (2000-2099)
    BASELINE_NOT_SET = "E2001"

    # Detection errors (3000-3099)
    DRIFT_DETECTION_FAILED = "E3001"

    # Configuration errors (5000-5099)
    ENGINE_CONFIG_ERROR = "E5001"
    UNKNOWN_PROFILE = "E5002"
    SETTINGS_VALIDATION_ERROR = "E5003"


class ErrorMessages:
    """Provides human-readable messages for each defined error code."""

    MESSAGES = {
        # Input validation errors
        ErrorCode.EMPTY_VALUES: "The provided sample cannot be empty.",
        ErrorCode.INVALID_SEQUENCE: "The provided sample must be a one-dimensional sequence of numbers.",
        ErrorCode.NON_NUMERIC_VALUE: "The provided sample contains a value that is not a real number.",
        ErrorCode.NON_FINITE_VALUE: "The provided sample contains NaN or infinite values.",
        ErrorCode.INVALID_THRESHOLD: "The drift threshold must be greater than 0 and at most 1.",
        ErrorCode.NON_POSITIVE_LIMIT: "Size and window limits must be positive integers.",
        ErrorCode.INVALID_OPTION: "An unsupported option value was provided.",
        # Baseline errors
        ErrorCode.BASELINE_NOT_SET: "Baseline not set. Call set_baseline() first.",
        # Detection errors
        ErrorCode.DRIFT_DETECTION_FAILED: "Failed to perform drift detection analysis.",
        # Configuration errors
        ErrorCode.ENGINE_CONFIG_ERROR: "Engine configuration is invalid or contains unsupported parameters.",
        ErrorCode.UNKNOWN_PROFILE: "The requested configuration profile does not exist.",
        ErrorCode.SETTINGS_VALIDATION_ERROR: "Settings validation failed. Check environment variables and config files.",
    }

    @classmethod
    def get_message(cls, error_code: ErrorCode) -> str:
        """Retrieves the message for a given error code.

        Args:
            error_code: The `ErrorCode` for which to retrieve the message.

        Returns:
            The corresponding error message, or a generic fallback.
        """
        return cls.MESSAGES.get(error_code, "An unknown error occurred.")


def create_error_response(
    error_code: ErrorCode,
    detail: Optional[str] = None,
    **additional_context,
) -> Dict[str, Any]:
    """Constructs a standardized dictionary describing an error.

    Args:
        error_code: The `ErrorCode` enum member for this error.
        detail: An optional, more specific message about the error.
        **additional_context: Extra key-value pairs to include under 'context'.

    Returns:
        A JSON-serializable dictionary describing the error.
    """
    response: Dict[str, Any] = {
        "error_code": error_code.value,
        "error_message": ErrorMessages.get_message(error_code),
    }
    if detail:
        response["detail"] = detail
    if additional_context:
        response["context"] = additional_context
    return response


def raise_validation_error(
    error_code: ErrorCode,
    detail: Optional[str] = None,
    **additional_context,
) -> None:
    """Raises a `ValidationError` carrying a standardized error payload.

    Args:
        error_code: The `ErrorCode` enum member for this error.
        detail: An optional, more specific message about the error. The
            default message for the code is used when omitted.
        **additional_context: Extra information attached to the exception.

    Raises:
        ValidationError: Always.
    """
    from driftwatch.utils.exceptions import ValidationError

    raise ValidationError(
        detail or ErrorMessages.get_message(error_code),
        code=error_code.value,
        context=create_error_response(error_code, detail, **additional_context),
    )
