"""
cacherine — Cache Alert Manager

Periodically evaluates CacheMetrics against the thresholds of an AlertConfig
and notifies the configured callback once per violated threshold.

State machine:
    Idle (constructed) → Monitoring (timer task scheduled) → Idle (stop())

The timer is an asyncio task scheduled on the running event loop. It reads
metrics without taking any cache lock; CacheMetrics serializes itself.
"""

import asyncio
import logging

from .config import AlertConfig
from .metrics import CacheMetrics, RecentStats

logger = logging.getLogger(__name__)


class AlertManager:
    """
    Cache alert manager.

    Binds one CacheMetrics to one AlertConfig. It accumulates nothing itself:
    every tick pulls a fresh snapshot from the metrics.
    """

    def __init__(self, metrics: CacheMetrics, config: AlertConfig):
        """
        Initialize the alert manager.

        Args:
            metrics: Metrics recorder to observe
            config: Thresholds, notification callback and check interval
        """
        self.metrics = metrics
        self.config = config
        self._task: asyncio.Task[None] | None = None

    @property
    def is_monitoring(self) -> bool:
        return self._task is not None and not self._task.done()

    def monitor(self) -> None:
        """
        Start periodic threshold checks on the running event loop.

        Calling monitor() while already monitoring has no effect.

        Raises:
            RuntimeError: If called without a running event loop
        """
        if self.is_monitoring:
            return

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as e:
            raise RuntimeError("AlertManager.monitor() requires a running event loop") from e

        self._task = loop.create_task(self._run(), name="cacherine-alert-manager")
        logger.debug(
            "Alert monitoring started",
            extra={"interval_seconds": self.config.alert_check_interval.total_seconds()},
        )

    async def stop(self) -> None:
        """Cancel the timer task and wait for it to finish."""
        task, self._task = self._task, None
        if task is None or task.done():
            return

        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.debug("Alert monitoring stopped")

    async def _run(self) -> None:
        interval = self.config.alert_check_interval.total_seconds()
        while True:
            await asyncio.sleep(interval)
            self.check_alerts()

    def check_alerts(self) -> list[str]:
        """
        Run one threshold evaluation and notify every violation.

        Returns:
            The alert messages that were sent
        """
        stats = self.metrics.get_recent_stats(self.config.alert_check_interval)
        messages = self.evaluate(stats)

        for message in messages:
            logger.warning(message, extra={"alert_stats": stats.to_dict()})
            self._notify(message)

        return messages

    def evaluate(self, stats: RecentStats) -> list[str]:
        """
        Compare a stats snapshot with the configured thresholds.

        Each of the six checks is independent; the result holds one message
        per violated threshold.
        """
        config = self.config
        messages: list[str] = []

        if stats.hit_rate < config.hit_rate_threshold:
            messages.append(
                "Warning: Low hit rate detected. "
                f"Actual: {stats.hit_rate} (Threshold: {config.hit_rate_threshold})"
            )
        if stats.miss_rate > config.miss_rate_threshold:
            messages.append(
                "Warning: High miss rate detected. "
                f"Actual: {stats.miss_rate} (Threshold: {config.miss_rate_threshold})"
            )
        if stats.p95_latency_ms > config.p95_latency_threshold_ms:
            messages.append(
                "Warning: High p95 latency detected. "
                f"Actual: {stats.p95_latency_ms}ms (Threshold: {config.p95_latency_threshold_ms}ms)"
            )
        if stats.p99_latency_ms > config.p99_latency_threshold_ms:
            messages.append(
                "Warning: High p99 latency detected. "
                f"Actual: {stats.p99_latency_ms}ms (Threshold: {config.p99_latency_threshold_ms}ms)"
            )
        if stats.average_latency_ms > config.average_latency_threshold_ms:
            messages.append(
                "Warning: High average latency detected. "
                f"Actual: {stats.average_latency_ms}ms (Threshold: {config.average_latency_threshold_ms}ms)"
            )
        if stats.evictions_per_minute > config.evictions_per_minute_threshold:
            messages.append(
                "Warning: High eviction rate detected. "
                f"Actual: {stats.evictions_per_minute} evictions/min "
                f"(Threshold: {config.evictions_per_minute_threshold} evictions/min)"
            )

        return messages

    def _notify(self, message: str) -> None:
        try:
            self.config.notify_callback(message)
        except Exception as e:
            # Log error but keep the timer alive
            logger.error(
                f"Alert notification callback failed: {e}",
                extra={"alert_message": message, "error": str(e)},
                exc_info=True,
            )
