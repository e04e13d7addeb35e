"""
Configuration management package for driftwatch.

This package provides domain-specific configuration classes that are composed
into a root Settings class.

Configuration profiles provide domain-specific detection defaults (financial,
healthcare, manufacturing) so that monitors need not be tuned by hand.
"""

from driftwatch.core.config.engine import EngineConfig
from driftwatch.core.config.monitoring import MonitoringConfig
from driftwatch.core.config.profiles import (
    ConfigProfile,
    FinancialProfile,
    GeneralProfile,
    HealthcareProfile,
    ManufacturingProfile,
    ProfileRegistry,
    get_profile_info,
    load_profile,
)
from driftwatch.core.config.settings import Settings, get_settings, reset_settings

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "EngineConfig",
    "MonitoringConfig",
    # Profile management
    "ConfigProfile",
    "GeneralProfile",
    "FinancialProfile",
    "HealthcareProfile",
    "ManufacturingProfile",
    "ProfileRegistry",
    "load_profile",
    "get_profile_info",
]
