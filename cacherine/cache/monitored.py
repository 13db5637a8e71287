"""
cacherine — Monitored Caches

Thread-safe caches that record performance metrics and raise threshold
alerts. Each MonitoredCache composes:

- a ThreadSafeCache over one eviction policy
- a CacheMetrics recorder (hits, misses, latencies, evictions)
- an AlertManager checking the metrics on a fixed interval

Only get() is timed. set(), clear() and keys() pass straight through; the
capacity evictions a set() triggers are counted for the eviction-rate alert.
"""

import asyncio
import logging
import time
from collections.abc import Hashable
from datetime import timedelta
from typing import Any

from ..monitoring import AlertConfig, AlertManager, CacheMetrics
from .policies import (
    EphemeralFIFOPolicy,
    EvictionPolicy,
    FIFOPolicy,
    LFUPolicy,
    LRUPolicy,
    MRUPolicy,
)
from .thread_safe import ThreadSafeCache

logger = logging.getLogger(__name__)


class MonitoredCache(ThreadSafeCache):
    """
    Thread-safe cache with performance monitoring.

    Alert monitoring starts as soon as the cache is constructed inside a
    running event loop. A cache built outside of one starts monitoring on
    its first operation. close() stops the alert timer.
    """

    def __init__(
        self,
        capacity: int,
        alert_config: AlertConfig,
        policy: type[EvictionPolicy] | None = None,
        max_latency_samples: int | None = None,
    ):
        """
        Initialize a monitored cache.

        Args:
            capacity: Maximum number of entries (must be > 0)
            alert_config: Alert thresholds and notification callback
            policy: Eviction policy class (defaults to ``policy_class``)
            max_latency_samples: Bound on retained latency samples, oldest
                dropped first (None = unbounded)

        Raises:
            InvalidArgumentError: If capacity or max_latency_samples is invalid
        """
        super().__init__(capacity, policy=policy)

        self._metrics = CacheMetrics(max_latency_samples=max_latency_samples)
        self._alert_manager = AlertManager(self._metrics, alert_config)
        self._closed = False
        self._ensure_monitoring()

    @property
    def metrics(self) -> CacheMetrics:
        """Metrics accumulated by this cache."""
        return self._metrics

    @property
    def alert_manager(self) -> AlertManager:
        return self._alert_manager

    def _ensure_monitoring(self) -> None:
        if self._closed or self._alert_manager.is_monitoring:
            return
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop, deferring alert monitoring for %s cache", self.policy_name)
            return
        self._alert_manager.monitor()

    def _handle_eviction(self, key: Hashable, value: Any) -> None:
        super()._handle_eviction(key, value)
        self._metrics.record_eviction()

    async def get(self, key: Hashable) -> Any | None:
        """Retrieve value from cache, recording a hit or miss with latency."""
        self._ensure_monitoring()

        start = time.perf_counter()
        value = await super().get(key)
        elapsed = timedelta(seconds=time.perf_counter() - start)

        if value is not None:
            self._metrics.record_hit(elapsed)
        else:
            self._metrics.record_miss()
        return value

    async def set(self, key: Hashable, value: Any) -> None:
        self._ensure_monitoring()
        await super().set(key, value)

    async def get_stats(self) -> dict[str, Any]:
        """Get cache statistics, including hit/miss and latency figures."""
        stats = await super().get_stats()
        stats.update(
            {
                "monitoring": self._alert_manager.is_monitoring,
                "metrics": self._metrics.to_dict(),
            }
        )
        return stats

    async def close(self) -> None:
        """Stop alert monitoring. Entries and metrics remain readable."""
        self._closed = True
        await self._alert_manager.stop()
        await super().close()


class MonitoredFIFOCache(MonitoredCache):
    """Monitored FIFO cache."""

    policy_class = FIFOPolicy


class MonitoredEphemeralFIFOCache(MonitoredCache):
    """Monitored ephemeral FIFO cache (entries are removed once read)."""

    policy_class = EphemeralFIFOPolicy


class MonitoredLRUCache(MonitoredCache):
    """Monitored LRU cache."""

    policy_class = LRUPolicy


class MonitoredMRUCache(MonitoredCache):
    """Monitored MRU cache."""

    policy_class = MRUPolicy


class MonitoredLFUCache(MonitoredCache):
    """Monitored LFU cache."""

    policy_class = LFUPolicy
