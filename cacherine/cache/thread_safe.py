"""
cacherine — Thread-Safe Caches

Serializes every operation on an eviction policy behind a single
threading.Lock owned by the cache instance. The lock guards tasks on one
event loop as well as callers on other threads running their own loops.
Independent cache instances never contend with each other; operations on different keys of the same cache are
still fully serialized (coarse-grained locking).

The lock is only held for the policy operation itself, which is a bounded,
in-memory mutation with no await inside it. No caller-supplied code runs
while it is held.
"""

import logging
import threading
from collections.abc import Hashable
from typing import Any

from ..errors import InvalidArgumentError
from .interface import CacheInterface
from .policies import (
    EphemeralFIFOPolicy,
    EvictionPolicy,
    FIFOPolicy,
    LFUPolicy,
    LRUPolicy,
    MRUPolicy,
)

logger = logging.getLogger(__name__)


class ThreadSafeCache(CacheInterface):
    """
    Concurrent cache over any EvictionPolicy.

    Subclasses bind a policy through the ``policy_class`` attribute; the base
    class can also be used directly by passing ``policy=``.

    Example:
        cache = ThreadSafeCache(100, policy=LRUPolicy)
        await cache.set("key", "value")
        value = await cache.get("key")
    """

    policy_class: type[EvictionPolicy] | None = None

    def __init__(
        self,
        capacity: int,
        policy: type[EvictionPolicy] | None = None,
    ):
        """
        Initialize a thread-safe cache.

        Args:
            capacity: Maximum number of entries (must be > 0)
            policy: Eviction policy class (defaults to ``policy_class``)

        Raises:
            InvalidArgumentError: If capacity is invalid or no policy is given
        """
        policy_class = policy or self.policy_class
        if policy_class is None:
            raise InvalidArgumentError(
                "An eviction policy is required",
                details={"cache": type(self).__name__},
            )

        self._policy = policy_class(capacity, on_evict=self._handle_eviction)
        self._evictions = 0

        # Lock for concurrent access (tasks and threads)
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._policy.capacity

    @property
    def policy_name(self) -> str:
        return self._policy.name

    def _handle_eviction(self, key: Hashable, value: Any) -> None:
        """Called by the policy (under the lock) for every capacity eviction."""
        self._evictions += 1

    async def get(self, key: Hashable) -> Any | None:
        """Retrieve value from cache."""
        with self._lock:
            return self._policy.get(key)

    async def set(self, key: Hashable, value: Any) -> None:
        """Store value in cache."""
        with self._lock:
            self._policy.set(key, value)

    async def clear(self) -> None:
        """Clear all entries from cache."""
        with self._lock:
            size = len(self._policy)
            self._policy.clear()
        logger.info("Cleared %d entries from %s cache", size, self.policy_name)

    async def keys(self) -> list[Hashable]:
        """Snapshot of the keys, taken under the lock."""
        with self._lock:
            return self._policy.keys()

    async def size(self) -> int:
        with self._lock:
            return len(self._policy)

    async def get_stats(self) -> dict[str, Any]:
        """Get cache statistics."""
        with self._lock:
            return {
                "policy": self.policy_name,
                "size": len(self._policy),
                "capacity": self.capacity,
                "evictions": self._evictions,
            }

    async def close(self) -> None:
        """Close cache and release resources."""
        # Plain caches hold no timers; entries stay readable after close
        logger.debug("%s cache closed", self.policy_name)

    def __repr__(self) -> str:
        # Unlocked snapshot; see EvictionPolicy.__repr__
        return repr(self._policy)


class FIFOCache(ThreadSafeCache):
    """Thread-safe FIFO cache: evicts the oldest inserted entry."""

    policy_class = FIFOPolicy


class EphemeralFIFOCache(ThreadSafeCache):
    """Thread-safe FIFO cache whose entries are removed once read."""

    policy_class = EphemeralFIFOPolicy


class LRUCache(ThreadSafeCache):
    """Thread-safe LRU cache: evicts the least recently used entry."""

    policy_class = LRUPolicy


class MRUCache(ThreadSafeCache):
    """Thread-safe MRU cache: evicts the most recently used entry."""

    policy_class = MRUPolicy


class LFUCache(ThreadSafeCache):
    """Thread-safe LFU cache: evicts the least frequently used entry."""

    policy_class = LFUPolicy
