"""
cacherine — LFU Eviction Policy

Least Frequently Used: each key carries an access count that starts at 1
when the key is first written and grows by one on every read. When room is
needed the key with the lowest count is evicted. Ties are broken in favour
of the oldest inserted key among those sharing the minimum count.
"""

from collections.abc import Hashable
from typing import Any

from .base import EvictionListener, EvictionPolicy


class LFUPolicy(EvictionPolicy):
    """
    LFU eviction policy.

    - get() increments the key's frequency count
    - set() on an existing key replaces the value without resetting the count
    - The frequency map always holds exactly the keys of the entry store
    """

    name = "lfu"

    def __init__(
        self,
        capacity: int,
        on_evict: EvictionListener | None = None,
    ):
        super().__init__(capacity, on_evict=on_evict)
        self._frequencies: dict[Hashable, int] = {}

    def get(self, key: Hashable) -> Any | None:
        if key not in self._entries:
            return None

        self._frequencies[key] += 1
        return self._entries[key]

    def set(self, key: Hashable, value: Any) -> None:
        if key in self._entries:
            self._entries[key] = value
            return

        if self.is_full():
            self._evict(self._least_frequent_key())

        self._entries[key] = value
        self._frequencies[key] = 1

    def frequency(self, key: Hashable) -> int:
        """Return the access count of key (0 when absent)."""
        return self._frequencies.get(key, 0)

    def clear(self) -> None:
        super().clear()
        self._frequencies.clear()

    def _least_frequent_key(self) -> Hashable:
        # min() keeps the first minimum it sees; the entry store iterates
        # in insertion order, so ties go to the oldest inserted key.
        return min(self._entries, key=self._frequencies.__getitem__)

    def _evict(self, key: Hashable) -> None:
        del self._frequencies[key]
        super()._evict(key)
