"""Utility package with lazy exports to avoid heavy import side effects."""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Tuple

_LAZY_IMPORTS: Dict[str, Tuple[str, str]] = {
    # Exceptions
    "DriftEngineError": ("driftwatch.utils.exceptions", "DriftEngineError"),
    "ValidationError": ("driftwatch.utils.exceptions", "ValidationError"),
    "BaselineNotSetError": ("driftwatch.utils.exceptions", "BaselineNotSetError"),
    "DriftDetectionError": ("driftwatch.utils.exceptions", "DriftDetectionError"),
    "SettingsValidationError": ("driftwatch.utils.exceptions", "SettingsValidationError"),
    "UnknownProfileError": ("driftwatch.utils.exceptions", "UnknownProfileError"),
    # Error codes/helpers
    "ErrorCode": ("driftwatch.utils.error_codes", "ErrorCode"),
    "ErrorMessages": ("driftwatch.utils.error_codes", "ErrorMessages"),
    "raise_validation_error": ("driftwatch.utils.error_codes", "raise_validation_error"),
    # Validation and statistics
    "NumericValidator": ("driftwatch.utils.validation", "NumericValidator"),
    "RunningStats": ("driftwatch.utils.statistics", "RunningStats"),
    "welford_stats": ("driftwatch.utils.statistics", "welford_stats"),
    "quick_stats": ("driftwatch.utils.statistics", "quick_stats"),
}

__all__ = sorted(_LAZY_IMPORTS)


def __getattr__(name: str) -> Any:
    """Dynamically import requested attributes on first access."""

    try:
        module_name, attr_name = _LAZY_IMPORTS[name]
    except KeyError as exc:  # pragma: no cover - defensive branch
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from exc

    module = import_module(module_name)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    """Return sorted attributes for IDE support."""

    return sorted(__all__)
