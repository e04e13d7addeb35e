"""
Service interfaces for driftwatch.

Abstract base classes for the drift engine and its external collaborators.

Usage:
    from driftwatch.interfaces import IDriftEngine, IEpisodeSink
"""

from driftwatch.interfaces.drift_interface import IDriftEngine
from driftwatch.interfaces.memory_interface import Episode, IEpisodeSink

__all__ = [
    "IDriftEngine",
    "IEpisodeSink",
    "Episode",
]
