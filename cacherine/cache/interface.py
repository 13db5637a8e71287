"""
cacherine — Cache Interface

Defines the abstract interface that all concurrent caches must implement.
"""

from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import Any


class CacheInterface(ABC):
    """
    Abstract base class for concurrent caches.

    All cache implementations must implement this interface to ensure
    consistent behavior across eviction policies (FIFO, LRU, MRU, LFU, ...).
    """

    @abstractmethod
    async def get(self, key: Hashable) -> Any | None:
        """
        Retrieve a value from the cache.

        Args:
            key: Cache key

        Returns:
            Cached value if found, None otherwise
        """
        pass

    @abstractmethod
    async def set(self, key: Hashable, value: Any) -> None:
        """
        Store a value in the cache.

        If the key is new and the cache is full, one entry is evicted
        according to the cache's eviction policy first.

        Args:
            key: Cache key
            value: Value to cache
        """
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Clear all entries from the cache."""
        pass

    @abstractmethod
    async def keys(self) -> list[Hashable]:
        """
        Get a snapshot of the stored keys.

        Returns:
            Keys in the cache's internal order (a copy, safe to iterate)
        """
        pass

    @abstractmethod
    async def size(self) -> int:
        """Return the number of stored entries."""
        pass

    @abstractmethod
    async def get_stats(self) -> dict[str, Any]:
        """
        Get cache statistics.

        Returns:
            Dictionary with cache statistics (size, capacity, evictions, etc.)
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """
        Close the cache and release resources (timers, tasks).

        Should be called during graceful shutdown.
        """
        pass

    async def get_many(self, keys: list[Hashable]) -> dict[Hashable, Any]:
        """
        Retrieve multiple values from the cache.

        Default implementation calls get() for each key, so every lookup
        goes through the cache's policy (and monitoring, where present).

        Args:
            keys: List of cache keys

        Returns:
            Dictionary mapping keys to values (missing keys are omitted)
        """
        result = {}
        for key in keys:
            value = await self.get(key)
            if value is not None:
                result[key] = value
        return result

    async def set_many(self, items: dict[Hashable, Any]) -> int:
        """
        Store multiple values in the cache.

        Default implementation calls set() for each item, in dict order.

        Args:
            items: Dictionary mapping keys to values

        Returns:
            Number of items stored
        """
        count = 0
        for key, value in items.items():
            await self.set(key, value)
            count += 1
        return count
