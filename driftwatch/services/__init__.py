"""Drift detection service exports with lazy loading."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - used only for static analysis
    from driftwatch.services.drift_engine import DriftEngine
    from driftwatch.services.episode_sink import InMemoryEpisodeSink

__all__ = ["DriftEngine", "InMemoryEpisodeSink"]


def __getattr__(name: str) -> Any:
    """Lazily import services to keep submodule imports free of cycles."""

    if name == "DriftEngine":
        from driftwatch.services.drift_engine import DriftEngine

        return DriftEngine
    if name == "InMemoryEpisodeSink":
        from driftwatch.services.episode_sink import InMemoryEpisodeSink

        return InMemoryEpisodeSink
    raise AttributeError(f"module 'driftwatch.services' has no attribute {name!r}")
