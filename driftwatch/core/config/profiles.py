"""
Configuration profiles for different monitoring domains.

Each profile sets detection defaults suited to a domain's tolerance for drift,
so that an engine monitoring credit scores and one monitoring patient
outcomes do not need to repeat the same tuning by hand.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from driftwatch.utils.exceptions import UnknownProfileError


class ConfigProfile(ABC):
    """Base class for configuration profiles.

    Each profile defines domain-specific defaults that override the base
    `EngineConfig` values.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Profile name."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Profile description."""
        pass

    @abstractmethod
    def get_overrides(self) -> Dict[str, Any]:
        """Get domain-specific configuration overrides.

        Returns:
            Dictionary of `EngineConfig` field overrides keyed by field name.
        """
        pass

    def apply_to_config(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """Apply profile overrides to a configuration dictionary.

        Args:
            config_dict: Base configuration dictionary.

        Returns:
            Updated configuration dictionary with profile overrides applied.
        """
        config_dict.update(self.get_overrides())
        return config_dict


class GeneralProfile(ConfigProfile):
    """Engine defaults, suitable for most prediction and feature streams."""

    @property
    def name(self) -> str:
        return "general"

    @property
    def description(self) -> str:
        return "General-purpose monitoring with default thresholds"

    def get_overrides(self) -> Dict[str, Any]:
        return {
            "drift_threshold": 0.1,
            "prediction_window": 7,
        }


class FinancialProfile(ConfigProfile):
    """Credit scoring, fraud, and portfolio risk models.

    PSI is the customary stability measure in credit risk, so it is the
    primary method and the threshold follows the usual PSI tolerance.
    """

    @property
    def name(self) -> str:
        return "financial"

    @property
    def description(self) -> str:
        return "Financial services monitoring with PSI-led scoring"

    def get_overrides(self) -> Dict[str, Any]:
        return {
            "drift_threshold": 0.15,
            "prediction_window": 30,
            "primary_method": "psi",
        }


class HealthcareProfile(ConfigProfile):
    """Patient outcome and diagnostic models, where drift must surface early."""

    @property
    def name(self) -> str:
        return "healthcare"

    @property
    def description(self) -> str:
        return "Healthcare monitoring with a conservative threshold"

    def get_overrides(self) -> Dict[str, Any]:
        return {
            "drift_threshold": 0.08,
            "prediction_window": 14,
        }


class ManufacturingProfile(ConfigProfile):
    """Quality control and predictive maintenance models."""

    @property
    def name(self) -> str:
        return "manufacturing"

    @property
    def description(self) -> str:
        return "Manufacturing monitoring for quality and maintenance models"

    def get_overrides(self) -> Dict[str, Any]:
        return {
            "drift_threshold": 0.12,
            "prediction_window": 7,
        }


class ProfileRegistry:
    """Registry for managing configuration profiles."""

    _profiles: Dict[str, ConfigProfile] = {
        "general": GeneralProfile(),
        "default": GeneralProfile(),  # Alias
        "financial": FinancialProfile(),
        "finance": FinancialProfile(),  # Alias
        "healthcare": HealthcareProfile(),
        "manufacturing": ManufacturingProfile(),
    }

    @classmethod
    def get_profile(cls, profile_name: str) -> Optional[ConfigProfile]:
        """Get a configuration profile by name (case-insensitive)."""
        return cls._profiles.get(profile_name.lower())

    @classmethod
    def get_available_profiles(cls) -> Dict[str, str]:
        """Get all available profiles with their descriptions, aliases excluded."""
        unique_profiles = {}
        for profile in cls._profiles.values():
            unique_profiles.setdefault(profile.name, profile.description)
        return unique_profiles

    @classmethod
    def register_profile(cls, profile: ConfigProfile) -> None:
        """Register a custom configuration profile."""
        cls._profiles[profile.name.lower()] = profile


def load_profile(profile_name: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration overrides for a specific profile.

    Args:
        profile_name: Name of the profile to load. Defaults to 'general'.

    Returns:
        Dictionary of `EngineConfig` field overrides.

    Raises:
        UnknownProfileError: If the profile name is not recognized.
    """
    if profile_name is None:
        profile_name = "general"

    profile = ProfileRegistry.get_profile(profile_name)
    if profile is None:
        raise UnknownProfileError(
            profile_name, available=list(ProfileRegistry.get_available_profiles())
        )

    return dict(profile.get_overrides())


def get_profile_info() -> Dict[str, Dict[str, str]]:
    """Get information about all available profiles."""
    profiles = ProfileRegistry.get_available_profiles()
    return {name: {"name": name, "description": desc} for name, desc in profiles.items()}
