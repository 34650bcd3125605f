"""
Generation history: most-recent-first, deduplicated, bounded
"""
from typing import List

import config


class HistoryLog:

    def __init__(self, limit=config.HISTORY_LIMIT):
        self.limit = limit
        self._entries: List[str] = []

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    @property
    def entries(self) -> List[str]:
        return list(self._entries)

    def record(self, entry: str):
        """Move `entry` to the front (adding it if new), then cap the log"""
        self._entries = [entry] + [item for item in self._entries if item != entry]
        del self._entries[self.limit:]

    def select(self, entry: str) -> str:
        """Return a past entry for republishing; the log itself is untouched"""
        return entry
