"""
cacherine — Cache Factory

Creates cache instances from configuration and keeps a registry of named
instances.

Key points:
- The eviction policy is selected with CACHE_POLICY=fifo|ephemeral_fifo|lru|mru|lfu
- CACHE_MONITORED=true wraps the cache with metrics and threshold alerts
- All configuration is typed and validated via Pydantic models

Examples:
    from cacherine.cache.factory import create_cache, get_cache

    # Uses env-configured policy (LRU by default)
    cache = create_cache()

    # Or explicitly supply a CacheConfig (e.g., for tests)
    from cacherine.config import CacheConfig, CachePolicy
    cfg = CacheConfig(policy=CachePolicy.LFU, capacity=128)
    lfu_cache = create_cache(cfg, name="lfu")
"""

from __future__ import annotations

import logging

from ..config import CacheConfig, CachePolicy, get_config
from ..errors import ConfigurationError
from ..monitoring import AlertConfig
from .interface import CacheInterface
from .monitored import (
    MonitoredCache,
    MonitoredEphemeralFIFOCache,
    MonitoredFIFOCache,
    MonitoredLFUCache,
    MonitoredLRUCache,
    MonitoredMRUCache,
)
from .thread_safe import (
    EphemeralFIFOCache,
    FIFOCache,
    LFUCache,
    LRUCache,
    MRUCache,
    ThreadSafeCache,
)

logger = logging.getLogger(__name__)

_CACHE_CLASSES: dict[CachePolicy, type[ThreadSafeCache]] = {
    CachePolicy.FIFO: FIFOCache,
    CachePolicy.EPHEMERAL_FIFO: EphemeralFIFOCache,
    CachePolicy.LRU: LRUCache,
    CachePolicy.MRU: MRUCache,
    CachePolicy.LFU: LFUCache,
}

_MONITORED_CACHE_CLASSES: dict[CachePolicy, type[MonitoredCache]] = {
    CachePolicy.FIFO: MonitoredFIFOCache,
    CachePolicy.EPHEMERAL_FIFO: MonitoredEphemeralFIFOCache,
    CachePolicy.LRU: MonitoredLRUCache,
    CachePolicy.MRU: MonitoredMRUCache,
    CachePolicy.LFU: MonitoredLFUCache,
}

# Global cache instances registry
_cache_instances: dict[str, CacheInterface] = {}


def _log_alert(message: str) -> None:
    """Default notification callback: alerts go to the log."""
    logger.warning("Cache alert: %s", message)


def _default_alert_config() -> AlertConfig:
    return AlertConfig.from_thresholds(get_config().alerts, notify_callback=_log_alert)


def create_cache(
    config: CacheConfig | None = None,
    name: str = "default",
    alert_config: AlertConfig | None = None,
) -> CacheInterface:
    """
    Create a cache instance based on configuration.

    Args:
        config: Cache configuration (uses global config if not provided)
        name: Cache instance name (for multiple cache instances)
        alert_config: Alert configuration for monitored caches (defaults to the
            global alert thresholds with a callback that logs each alert)

    Returns:
        Configured cache instance

    Raises:
        ConfigurationError: If the configured policy is unknown
    """
    # Return existing instance if already created
    if name in _cache_instances:
        logger.debug("Returning existing cache instance: %s", name)
        return _cache_instances[name]

    # Use global config if not provided
    if config is None:
        config = get_config().cache

    try:
        policy = CachePolicy(config.policy)
    except ValueError as e:
        raise ConfigurationError(
            f"Unknown cache policy: {config.policy}",
            details={
                "policy": str(config.policy),
                "supported": [p.value for p in CachePolicy],
            },
        ) from e

    logger.info(
        "Creating cache instance '%s' with policy: %s",
        name,
        policy.value,
        extra={"cache_name": name, "policy": policy.value, "capacity": config.capacity},
    )

    cache: CacheInterface
    if config.monitored:
        cache = _MONITORED_CACHE_CLASSES[policy](
            config.capacity,
            alert_config=alert_config or _default_alert_config(),
        )
    else:
        cache = _CACHE_CLASSES[policy](config.capacity)

    # Store instance in registry
    _cache_instances[name] = cache
    return cache


def get_cache(name: str = "default") -> CacheInterface:
    """
    Get an existing cache instance by name.

    If the instance doesn't exist, it will be created automatically
    using the global configuration.

    Args:
        name: Cache instance name

    Returns:
        Cache instance
    """
    if name not in _cache_instances:
        logger.debug("Cache instance '%s' not found, creating new instance", name)
        return create_cache(name=name)

    return _cache_instances[name]


async def close_all_caches() -> None:
    """
    Close all cache instances and release resources.

    Stops the alert timers of monitored caches. Should be called during
    graceful shutdown.
    """
    if not _cache_instances:
        logger.debug("No cache instances to close")
        return

    logger.info("Closing %d cache instance(s)...", len(_cache_instances))

    for name, cache in list(_cache_instances.items()):
        try:
            await cache.close()
            logger.info("Closed cache instance: %s", name)
        except Exception as e:
            logger.error(
                "Error closing cache instance '%s': %s",
                name,
                e,
                extra={"cache_name": name, "error": str(e)},
                exc_info=True,
            )

    _cache_instances.clear()
    logger.info("All cache instances closed")


def reset_cache_factory() -> None:
    """
    Reset the cache factory by clearing all instance references.

    Does NOT call close() on instances - use close_all_caches() for proper cleanup.

    Warning: Only use this in testing contexts.
    """
    count = len(_cache_instances)
    _cache_instances.clear()
    logger.debug("Reset cache factory, cleared %d instance reference(s)", count)


def list_cache_instances() -> list[str]:
    """
    List all registered cache instance names.

    Returns:
        List of cache instance names
    """
    return list(_cache_instances.keys())
