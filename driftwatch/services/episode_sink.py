"""
Bounded in-memory episode sink.

Keeps the most recent episodes in insertion order for inspection and tests.
"""

from collections import OrderedDict
from threading import Lock
from typing import List, Optional
from uuid import uuid4

from driftwatch.core.logging import get_logger
from driftwatch.interfaces.memory_interface import Episode, IEpisodeSink

logger = get_logger(__name__)


class InMemoryEpisodeSink(IEpisodeSink):
    """Thread-safe episode store that drops the oldest episodes beyond ``max_size``."""

    def __init__(self, max_size: int = 1000):
        self.max_size = max_size
        self._episodes: "OrderedDict[str, Episode]" = OrderedDict()
        self._lock = Lock()

    def record_episode(self, episode: Episode) -> str:
        episode_id = str(uuid4())
        with self._lock:
            self._episodes[episode_id] = episode
            while len(self._episodes) > self.max_size:
                self._episodes.popitem(last=False)
        logger.debug("Episode recorded", episode_id=episode_id, task=episode.task)
        return episode_id

    def get(self, episode_id: str) -> Optional[Episode]:
        with self._lock:
            return self._episodes.get(episode_id)

    def get_all(self, task: Optional[str] = None) -> List[Episode]:
        """Stored episodes, oldest first, optionally filtered by task."""
        with self._lock:
            episodes = list(self._episodes.values())
        if task is not None:
            episodes = [episode for episode in episodes if episode.task == task]
        return episodes

    def clear(self) -> None:
        with self._lock:
            self._episodes.clear()

    def __len__(self) -> int:
        return len(self._episodes)
