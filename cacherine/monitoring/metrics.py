"""
cacherine — Cache Metrics

Accumulates hit/miss counters, per-hit latency samples and eviction
timestamps, and derives rates, average latency and percentiles on demand.

Every recording method and every derived statistic takes the recorder's own
lock, so metrics can be written by cache callers and read by the alert
timer concurrently without involving the cache's lock.
"""

import threading
from collections import deque
from dataclasses import asdict, dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

from ..errors import InvalidArgumentError

_ONE_MS = timedelta(milliseconds=1)


@dataclass(frozen=True)
class RecentStats:
    """Snapshot returned by CacheMetrics.get_recent_stats()."""

    hit_rate: float
    miss_rate: float
    average_latency_ms: int
    p95_latency_ms: int
    p99_latency_ms: int
    evictions_per_minute: int

    def to_dict(self) -> dict[str, Any]:
        """Convert stats to dictionary."""
        return asdict(self)


class CacheMetrics:
    """
    Cache performance metrics recorder.

    Latencies are timedelta values (microsecond resolution). Hit and miss
    counters and the latency samples only grow until reset().
    """

    def __init__(self, max_latency_samples: int | None = None) -> None:
        """
        Initialize metrics.

        Args:
            max_latency_samples: Keep at most this many latency samples,
                dropping the oldest (None = keep all until reset())
        """
        if max_latency_samples is not None and max_latency_samples <= 0:
            raise InvalidArgumentError(
                "max_latency_samples must be greater than 0",
                details={"max_latency_samples": max_latency_samples},
            )

        self.max_latency_samples = max_latency_samples
        self._hits = 0
        self._misses = 0
        self._latencies: deque[timedelta] = deque(maxlen=max_latency_samples)
        self._evictions: list[datetime] = []
        self._lock = threading.Lock()

    @property
    def hits(self) -> int:
        return self._hits

    @property
    def misses(self) -> int:
        return self._misses

    @property
    def total_requests(self) -> int:
        return self._hits + self._misses

    @property
    def evictions(self) -> int:
        """Number of eviction events recorded since the last reset."""
        return len(self._evictions)

    @property
    def hit_rate(self) -> float:
        """Ratio of hits to total requests (0.0 when nothing was recorded)."""
        with self._lock:
            return self._rate(self._hits)

    @property
    def miss_rate(self) -> float:
        """Ratio of misses to total requests (0.0 when nothing was recorded)."""
        with self._lock:
            return self._rate(self._misses)

    @property
    def average_latency(self) -> timedelta:
        """Mean hit latency, truncated to whole microseconds."""
        with self._lock:
            return self._average_latency()

    def get_latency_percentile(self, percentile: float) -> timedelta:
        """
        Get the latency at the given percentile.

        Samples are sorted ascending and the sample at index
        floor((n - 1) * percentile / 100) is returned. The median of an
        even number of samples is the mean of the two central samples.

        Args:
            percentile: Percentile in the range [0, 100]

        Returns:
            Latency at the percentile (zero when no samples were recorded)

        Raises:
            InvalidArgumentError: If percentile is outside [0, 100]
        """
        if not 0 <= percentile <= 100:
            raise InvalidArgumentError(
                "percentile must be between 0 and 100",
                details={"percentile": percentile},
            )

        with self._lock:
            return self._percentile(sorted(self._latencies), percentile)

    def record_hit(self, latency: timedelta) -> None:
        """Record a cache hit together with its request latency."""
        with self._lock:
            self._hits += 1
            self._latencies.append(latency)

    def record_miss(self) -> None:
        """Record a cache miss."""
        with self._lock:
            self._misses += 1

    def record_eviction(self) -> None:
        """Record an eviction event at the current wall-clock time."""
        with self._lock:
            self._evictions.append(datetime.now(UTC))

    def get_recent_stats(self, window: timedelta) -> RecentStats:
        """
        Get a statistics snapshot for alert evaluation.

        Rates and latencies cover the whole retained history; only the
        eviction count is restricted to the last ``window``.

        Args:
            window: Time window for the eviction rate

        Returns:
            RecentStats with latencies in whole milliseconds

        Raises:
            InvalidArgumentError: If window is shorter than one millisecond
        """
        window_ms = window // _ONE_MS
        if window_ms <= 0:
            raise InvalidArgumentError(
                "window must be at least 1 millisecond",
                details={"window_seconds": window.total_seconds()},
            )

        with self._lock:
            window_start = datetime.now(UTC) - window
            recent_evictions = sum(1 for t in self._evictions if t > window_start)
            samples = sorted(self._latencies)

            return RecentStats(
                hit_rate=self._rate(self._hits),
                miss_rate=self._rate(self._misses),
                average_latency_ms=self._average_latency() // _ONE_MS,
                p95_latency_ms=self._percentile(samples, 95) // _ONE_MS,
                p99_latency_ms=self._percentile(samples, 99) // _ONE_MS,
                evictions_per_minute=recent_evictions * 60000 // window_ms,
            )

    def reset(self) -> None:
        """Reset all counters and clear latency and eviction history."""
        with self._lock:
            self._hits = 0
            self._misses = 0
            self._latencies.clear()
            self._evictions.clear()

    def to_dict(self) -> dict[str, Any]:
        """Convert metrics to dictionary."""
        with self._lock:
            samples = sorted(self._latencies)
            return {
                "hits": self._hits,
                "misses": self._misses,
                "total_requests": self._hits + self._misses,
                "hit_rate": self._rate(self._hits),
                "miss_rate": self._rate(self._misses),
                "average_latency_ms": self._average_latency() / _ONE_MS,
                "p95_latency_ms": self._percentile(samples, 95) / _ONE_MS,
                "p99_latency_ms": self._percentile(samples, 99) / _ONE_MS,
                "evictions": len(self._evictions),
            }

    # Helpers below expect the lock to be held

    def _rate(self, count: int) -> float:
        total = self._hits + self._misses
        return count / total if total > 0 else 0.0

    def _average_latency(self) -> timedelta:
        if not self._latencies:
            return timedelta(0)
        total = sum(self._latencies, timedelta(0))
        return total // len(self._latencies)

    @staticmethod
    def _percentile(samples: list[timedelta], percentile: float) -> timedelta:
        if not samples:
            return timedelta(0)

        n = len(samples)
        if percentile == 50 and n % 2 == 0:
            return (samples[n // 2 - 1] + samples[n // 2]) // 2

        index = int((n - 1) * percentile / 100)
        return samples[index]
