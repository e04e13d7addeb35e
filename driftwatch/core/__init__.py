"""
Core components.

This module contains fundamental components like configuration and logging.
"""

from .config import EngineConfig, MonitoringConfig, Settings, get_settings
from .logging import get_contextual_logger, get_logger, setup_structured_logging

__all__ = [
    "EngineConfig",
    "MonitoringConfig",
    "Settings",
    "get_settings",
    "setup_structured_logging",
    "get_logger",
    "get_contextual_logger",
]
