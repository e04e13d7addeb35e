"""
Interface for Episode Sink

Defines the write-only contract for stores that record engine activity as
learning episodes.
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Episode:
    """One recorded engine action and how well it went."""

    session_id: str
    task: str
    score: float
    success: bool
    critique: Optional[str] = None
    timestamp: float = field(default_factory=time.time)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "session_id": self.session_id,
            "task": self.task,
            "score": self.score,
            "success": self.success,
            "critique": self.critique,
            "timestamp": self.timestamp,
        }


class IEpisodeSink(ABC):
    """
    Interface for episode sinks.

    The engine records episodes after each baseline change and each check.
    Implementations must not assume the engine waits on or retries them.
    """

    @abstractmethod
    def record_episode(self, episode: Episode) -> str:
        """
        Store an episode.

        Args:
            episode: The episode to store

        Returns:
            Identifier assigned to the stored episode
        """
        pass
