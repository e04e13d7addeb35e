"""
Root Settings class composing all domain-specific configurations.

This module provides the main Settings class that brings together the engine
and monitoring configuration into a single, cohesive settings object.
"""

import os
from typing import Any, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

from driftwatch.core.config.engine import EngineConfig
from driftwatch.core.config.monitoring import MonitoringConfig
from driftwatch.core.config.profiles import get_profile_info, load_profile
from driftwatch.utils.exceptions import SettingsValidationError


class Settings(BaseSettings):
    """Main settings class composing all domain-specific configurations.

    Attributes:
        engine: Drift engine thresholds, bounds, and optimization knobs.
        monitoring: Logging and metrics configuration.
    """

    engine: EngineConfig = Field(default_factory=EngineConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    def _validate_recency_within_history(self) -> None:
        """Ensures the uncompressed window fits inside the history bound.

        Raises:
            SettingsValidationError: If recency_window exceeds max_history_size.
        """
        if self.engine.recency_window > self.engine.max_history_size:
            raise SettingsValidationError(
                f"recency_window ({self.engine.recency_window}) cannot exceed "
                f"max_history_size ({self.engine.max_history_size})"
            )

    def _validate_trend_within_history(self) -> None:
        """Ensures the trend window can be filled from retained history.

        Raises:
            SettingsValidationError: If trend_window exceeds max_history_size.
        """
        if self.engine.trend_window > self.engine.max_history_size:
            raise SettingsValidationError(
                f"trend_window ({self.engine.trend_window}) cannot exceed "
                f"max_history_size ({self.engine.max_history_size})"
            )

    @model_validator(mode="after")
    def validate_configuration_consistency(self):
        """Performs cross-field validation to ensure configuration consistency.

        Returns:
            The validated Settings instance.
        """
        self._validate_recency_within_history()
        self._validate_trend_within_history()
        return self

    @property
    def log_level(self) -> str:
        return self.monitoring.log_level

    @property
    def drift_threshold(self) -> float:
        return self.engine.drift_threshold

    @classmethod
    def load_from_profile(cls, profile_name: Optional[str] = None, **overrides: Any) -> "Settings":
        """Load settings with profile-based engine defaults.

        Environment variables still configure the monitoring section. Explicit
        keyword overrides take precedence over the profile's engine values.

        Args:
            profile_name: Name of the profile to load (general, financial,
                healthcare, manufacturing). If None, uses DRIFTWATCH_PROFILE or
                defaults to 'general'.
            **overrides: EngineConfig field overrides.

        Returns:
            Settings instance with profile defaults applied.

        Example:
            settings = Settings.load_from_profile("healthcare")
        """
        if profile_name is None:
            profile_name = os.getenv("DRIFTWATCH_PROFILE", "general")

        values = load_profile(profile_name)
        values.update(overrides)
        return cls(engine=EngineConfig(**values))

    @staticmethod
    def get_available_profiles() -> dict:
        """Get information about available configuration profiles."""
        return get_profile_info()

    class Config:
        """Pydantic configuration options for the Settings class.

        Attributes:
            env_prefix: The prefix for environment variables (e.g., DRIFTWATCH_LOG_LEVEL).
            env_file: The name of the environment file to load (e.g., .env).
            case_sensitive: Whether environment variables are case-sensitive.
            extra: Setting to ignore extra fields provided.
        """

        env_prefix = "DRIFTWATCH_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Returns the process-wide settings instance, creating it on first use.

    Uses the DRIFTWATCH_PROFILE environment variable when set.

    Returns:
        The singleton instance of the application settings.
    """
    global _settings
    if _settings is None:
        profile_name = os.getenv("DRIFTWATCH_PROFILE")
        _settings = Settings.load_from_profile(profile_name) if profile_name else Settings()
    return _settings


def reset_settings() -> None:
    """Drops the cached settings instance so the next call re-reads the environment."""
    global _settings
    _settings = None
