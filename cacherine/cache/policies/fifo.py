"""
cacherine — FIFO Eviction Policy

First In, First Out: the longest-resident entry is evicted, regardless of
how often or how recently it was read.
"""

from collections.abc import Hashable
from typing import Any

from .base import EvictionPolicy


class FIFOPolicy(EvictionPolicy):
    """
    FIFO eviction policy.

    - get() never changes the eviction order
    - set() on an existing key replaces the value and keeps its position
    - When full, the oldest inserted key is evicted before a new key is added
    """

    name = "fifo"

    def get(self, key: Hashable) -> Any | None:
        return self._entries.get(key)

    def set(self, key: Hashable, value: Any) -> None:
        if key not in self._entries and self.is_full():
            oldest = next(iter(self._entries))
            self._evict(oldest)

        self._entries[key] = value
