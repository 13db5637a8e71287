"""
cacherine — Eviction Policy Base

Defines the single-threaded contract every eviction policy implements.
A policy owns an insertion-ordered entry store and a fixed entry-count
capacity; subclasses decide how reads and writes reorder the store and
which entry is removed when room must be made for a new key.

Policies are not safe for concurrent use on their own. Wrap them with
ThreadSafeCache for that.
"""

import logging
from abc import ABC, abstractmethod
from collections import OrderedDict
from collections.abc import Callable, Hashable
from typing import Any

from ...errors import validate_capacity

logger = logging.getLogger(__name__)

EvictionListener = Callable[[Hashable, Any], None]


class EvictionPolicy(ABC):
    """
    Abstract base class for eviction policies.

    The entry store is an OrderedDict: the first entry is the "oldest" end
    and the last entry is the "newest" end. What "oldest" means (insertion
    time, recency of access) is defined by each subclass.
    """

    #: Short policy identifier used in stats and logs
    name: str = "base"

    def __init__(
        self,
        capacity: int,
        on_evict: EvictionListener | None = None,
    ):
        """
        Initialize an eviction policy.

        Args:
            capacity: Maximum number of entries (must be > 0)
            on_evict: Optional listener called with (key, value) after each
                capacity eviction

        Raises:
            InvalidArgumentError: If capacity is not a positive integer
        """
        self.capacity = validate_capacity(capacity)
        self._on_evict = on_evict
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()

    @abstractmethod
    def get(self, key: Hashable) -> Any | None:
        """
        Retrieve the value stored under key.

        Args:
            key: Cache key

        Returns:
            Cached value, or None if the key is absent
        """
        pass

    @abstractmethod
    def set(self, key: Hashable, value: Any) -> None:
        """
        Store value under key, evicting one entry first if the key is new
        and the cache is full.

        Args:
            key: Cache key
            value: Value to cache
        """
        pass

    def clear(self) -> None:
        """Remove every entry. No eviction events are reported."""
        self._entries.clear()

    def keys(self) -> list[Hashable]:
        """Return a copy of the keys in store order."""
        return list(self._entries)

    def size(self) -> int:
        """Return the number of stored entries."""
        return len(self._entries)

    def is_full(self) -> bool:
        return len(self._entries) >= self.capacity

    def _evict(self, key: Hashable) -> None:
        """Remove key as a capacity eviction and notify the listener."""
        value = self._entries.pop(key)
        logger.debug("Evicted key from %s cache: %r", self.name, key)
        if self._on_evict is not None:
            self._on_evict(key, value)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        return repr(dict(self._entries))
