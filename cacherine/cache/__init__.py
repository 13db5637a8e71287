"""
cacherine — Cache Module

Provides in-process caches with pluggable eviction policies.

- policies/: single-threaded eviction policies (FIFO, ephemeral FIFO, LRU, MRU, LFU)
- thread_safe.py: lock-serialized caches over any policy
- monitored.py: thread-safe caches with metrics and threshold alerts
- factory.py: configuration-driven construction and a named instance registry

Usage:
    from cacherine.cache import LRUCache

    cache = LRUCache(capacity=100)
    await cache.set("key", "value")
    value = await cache.get("key")
"""

from .factory import (
    close_all_caches,
    create_cache,
    get_cache,
    list_cache_instances,
    reset_cache_factory,
)
from .interface import CacheInterface
from .monitored import (
    MonitoredCache,
    MonitoredEphemeralFIFOCache,
    MonitoredFIFOCache,
    MonitoredLFUCache,
    MonitoredLRUCache,
    MonitoredMRUCache,
)
from .policies import (
    EphemeralFIFOPolicy,
    EvictionPolicy,
    FIFOPolicy,
    LFUPolicy,
    LRUPolicy,
    MRUPolicy,
)
from .thread_safe import (
    EphemeralFIFOCache,
    FIFOCache,
    LFUCache,
    LRUCache,
    MRUCache,
    ThreadSafeCache,
)

__all__ = [
    # Factory functions
    "create_cache",
    "get_cache",
    "close_all_caches",
    "list_cache_instances",
    "reset_cache_factory",
    # Interface
    "CacheInterface",
    # Policies (single-threaded)
    "EvictionPolicy",
    "FIFOPolicy",
    "EphemeralFIFOPolicy",
    "LRUPolicy",
    "MRUPolicy",
    "LFUPolicy",
    # Thread-safe caches
    "ThreadSafeCache",
    "FIFOCache",
    "EphemeralFIFOCache",
    "LRUCache",
    "MRUCache",
    "LFUCache",
    # Monitored caches
    "MonitoredCache",
    "MonitoredFIFOCache",
    "MonitoredEphemeralFIFOCache",
    "MonitoredLRUCache",
    "MonitoredMRUCache",
    "MonitoredLFUCache",
]
