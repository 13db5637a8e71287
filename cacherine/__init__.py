"""
cacherine — In-process key-value caches

Interchangeable eviction policies (FIFO, ephemeral FIFO, LRU, MRU, LFU),
thread-safe cache wrappers, and an optional monitoring layer that records
hit/miss/latency/eviction metrics and raises threshold alerts.

Usage:
    from cacherine import AlertConfig, MonitoredLRUCache

    cache = MonitoredLRUCache(100, alert_config=AlertConfig(notify_callback=print))
    await cache.set("key", "value")
    assert await cache.get("key") == "value"
    print(cache.metrics.hit_rate)
"""

from .cache import (
    CacheInterface,
    EphemeralFIFOCache,
    EphemeralFIFOPolicy,
    EvictionPolicy,
    FIFOCache,
    FIFOPolicy,
    LFUCache,
    LFUPolicy,
    LRUCache,
    LRUPolicy,
    MonitoredCache,
    MonitoredEphemeralFIFOCache,
    MonitoredFIFOCache,
    MonitoredLFUCache,
    MonitoredLRUCache,
    MonitoredMRUCache,
    MRUCache,
    MRUPolicy,
    ThreadSafeCache,
    create_cache,
    get_cache,
)
from .errors import CacherineError, ConfigurationError, InvalidArgumentError
from .monitoring import AlertConfig, AlertManager, CacheMetrics, RecentStats

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Errors
    "CacherineError",
    "ConfigurationError",
    "InvalidArgumentError",
    # Caches
    "CacheInterface",
    "EvictionPolicy",
    "FIFOPolicy",
    "EphemeralFIFOPolicy",
    "LRUPolicy",
    "MRUPolicy",
    "LFUPolicy",
    "ThreadSafeCache",
    "FIFOCache",
    "EphemeralFIFOCache",
    "LRUCache",
    "MRUCache",
    "LFUCache",
    "MonitoredCache",
    "MonitoredFIFOCache",
    "MonitoredEphemeralFIFOCache",
    "MonitoredLRUCache",
    "MonitoredMRUCache",
    "MonitoredLFUCache",
    "create_cache",
    "get_cache",
    # Monitoring
    "AlertConfig",
    "AlertManager",
    "CacheMetrics",
    "RecentStats",
]
