"""
cacherine — MRU Eviction Policy

Most Recently Used: the entry touched last is the one evicted when room is
needed. Eviction happens before the incoming key is inserted, so the key
being written is never the victim; a freshly written key always survives
its own set().
"""

from collections.abc import Hashable
from typing import Any

from .base import EvictionPolicy


class MRUPolicy(EvictionPolicy):
    """MRU eviction policy."""

    name = "mru"

    def get(self, key: Hashable) -> Any | None:
        if key not in self._entries:
            return None

        self._entries.move_to_end(key)
        return self._entries[key]

    def set(self, key: Hashable, value: Any) -> None:
        if key in self._entries:
            # Remove then reinsert so the key lands on the most-recent end
            del self._entries[key]
        elif self.is_full():
            most_recent = next(reversed(self._entries))
            self._evict(most_recent)

        self._entries[key] = value
