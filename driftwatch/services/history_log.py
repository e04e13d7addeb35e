"""
Bounded detection history with compression of older entries.

The most recent ``recency_window`` entries are kept in full. Older entries
are replaced by `CompressedEntry` records that drop per-method scores. The
log never holds more than ``max_size`` entries; the oldest are dropped first.
"""

from collections import deque
from typing import Deque, List, Union

from driftwatch.models.results import (
    CompressedEntry,
    ComputedResult,
    HistoryEntry,
    SkippedResult,
)
from driftwatch.utils.validation import NumericValidator


class HistoryLog:
    """Append-only, size-bounded history of detection results.

    Entries before ``_compressed_upto`` are known to be compressed, so each
    append compresses only entries that have just left the recency window.
    """

    def __init__(self, max_size: int = 1000, recency_window: int = 100):
        self.max_size = NumericValidator.validate_positive_int(max_size, "max_history_size")
        self.recency_window = NumericValidator.validate_positive_int(
            recency_window, "recency_window"
        )
        self._entries: Deque[HistoryEntry] = deque()
        self._compressed_upto = 0

    def append(self, entry: Union[ComputedResult, SkippedResult]) -> None:
        self._entries.append(entry)

        if len(self._entries) > self.max_size:
            self._entries.popleft()
            if self._compressed_upto:
                self._compressed_upto -= 1

        limit = len(self._entries) - self.recency_window
        while self._compressed_upto < limit:
            index = self._compressed_upto
            current = self._entries[index]
            if not isinstance(current, CompressedEntry):
                self._entries[index] = CompressedEntry.from_entry(current)
            self._compressed_upto += 1

    def entries(self) -> List[HistoryEntry]:
        """Snapshot of all entries, oldest first."""
        return list(self._entries)

    def full_entries(self) -> List[Union[ComputedResult, SkippedResult]]:
        """Snapshot of the uncompressed entries, oldest first."""
        return [entry for entry in self._entries if not isinstance(entry, CompressedEntry)]

    def recent(self, count: int) -> List[HistoryEntry]:
        """The last ``count`` entries, oldest first."""
        if count <= 0:
            return []
        return list(self._entries)[-count:]

    @property
    def compressed_count(self) -> int:
        return self._compressed_upto

    def clear(self) -> None:
        self._entries.clear()
        self._compressed_upto = 0

    def __len__(self) -> int:
        return len(self._entries)
