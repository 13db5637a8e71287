"""
cacherine — LRU Eviction Policy

Least Recently Used: every read or write moves the key to the most-recent
end of the store; the entry at the least-recent end is evicted.
"""

from collections.abc import Hashable
from typing import Any

from .base import EvictionPolicy


class LRUPolicy(EvictionPolicy):
    """
    LRU eviction policy.

    Features:
    - O(1) get/set using OrderedDict.move_to_end
    - Reads and writes both count as "use"
    """

    name = "lru"

    def get(self, key: Hashable) -> Any | None:
        if key not in self._entries:
            return None

        # Move to end (mark as recently used)
        self._entries.move_to_end(key)
        return self._entries[key]

    def set(self, key: Hashable, value: Any) -> None:
        if key in self._entries:
            self._entries.move_to_end(key)
        elif self.is_full():
            least_recent = next(iter(self._entries))
            self._evict(least_recent)

        self._entries[key] = value
