"""
Bounded memoization cache for detection results.

Results are keyed by a 64-bit BLAKE2b digest of the current sample's raw
float64 bytes. Two different samples sharing a digest would return the wrong
result; with 64 bits and at most a few hundred live entries the probability
is around 1e-15 per lookup, which is accepted. The cache is cleared whenever
the baseline changes.
"""

import hashlib
from collections import OrderedDict
from typing import Any, Dict, Optional

import numpy as np

from driftwatch.core.logging import get_logger
from driftwatch.models.results import ComputedResult
from driftwatch.utils.validation import NumericValidator

logger = get_logger(__name__)

DIGEST_SIZE = 8


def hash_sample(values: np.ndarray) -> str:
    """Returns the hex digest identifying a sample's exact float64 content."""
    data = np.ascontiguousarray(values, dtype=np.float64).tobytes()
    return hashlib.blake2b(data, digest_size=DIGEST_SIZE).hexdigest()


class ResultCache:
    """Insertion-ordered FIFO cache of computed results.

    When a new key would exceed ``max_size`` entries, the oldest inserted key
    is evicted. Re-inserting an existing key does not refresh its position.

    Attributes:
        max_size: Maximum number of cached results.
    """

    def __init__(self, max_size: int = 100):
        self.max_size = NumericValidator.validate_positive_int(max_size, "max_cache_size")
        self._entries: "OrderedDict[str, ComputedResult]" = OrderedDict()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def key_for(self, values: np.ndarray) -> Optional[str]:
        """Computes the cache key for a sample.

        Returns:
            The key, or None when the sample cannot be hashed, in which case
            the caller should compute without the cache.
        """
        try:
            return hash_sample(values)
        except (TypeError, ValueError, BufferError) as e:
            logger.warning("Sample hashing failed, bypassing result cache", error=str(e))
            return None

    def get(self, key: str) -> Optional[ComputedResult]:
        result = self._entries.get(key)
        if result is None:
            self._misses += 1
        else:
            self._hits += 1
        return result

    def put(self, key: str, result: ComputedResult) -> None:
        """Stores a result, evicting the oldest entries beyond ``max_size``."""
        if key in self._entries:
            self._entries[key] = result
            return

        self._entries[key] = result
        while len(self._entries) > self.max_size:
            evicted_key, _ = self._entries.popitem(last=False)
            self._evictions += 1
            logger.debug("Evicted cached result", key=evicted_key)

    def clear(self) -> None:
        self._entries.clear()

    def keys(self) -> list:
        """Keys in insertion order, oldest first."""
        return list(self._entries)

    def get_stats(self) -> Dict[str, Any]:
        return {
            "size": len(self._entries),
            "max_size": self.max_size,
            "hits": self._hits,
            "misses": self._misses,
            "evictions": self._evictions,
        }

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
