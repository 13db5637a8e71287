"""
cacherine — Alert Manager Tests

Tests threshold evaluation, notification delivery, the periodic timer and
callback failure isolation.
"""

import asyncio
import logging
from collections.abc import Callable
from datetime import timedelta

import pytest

from cacherine.monitoring import AlertConfig, AlertManager, CacheMetrics, RecentStats

FAST_INTERVAL = timedelta(milliseconds=50)


def healthy_stats(**overrides: object) -> RecentStats:
    values: dict[str, object] = {
        "hit_rate": 0.9,
        "miss_rate": 0.1,
        "average_latency_ms": 5,
        "p95_latency_ms": 10,
        "p99_latency_ms": 20,
        "evictions_per_minute": 0,
    }
    values.update(overrides)
    return RecentStats(**values)  # type: ignore[arg-type]


class TestAlertEvaluation:
    """Each threshold is checked independently."""

    @pytest.fixture
    def manager(self, make_alert_config: Callable[..., AlertConfig]) -> AlertManager:
        return AlertManager(CacheMetrics(), make_alert_config())

    def test_healthy_stats_produce_no_alerts(self, manager: AlertManager) -> None:
        """Test that healthy stats raise no alerts."""
        assert manager.evaluate(healthy_stats()) == []

    @pytest.mark.parametrize(
        ("overrides", "expected"),
        [
            ({"hit_rate": 0.1}, "Warning: Low hit rate detected. Actual: 0.1 (Threshold: 0.5)"),
            ({"miss_rate": 0.8}, "Warning: High miss rate detected. Actual: 0.8 (Threshold: 0.5)"),
            ({"p95_latency_ms": 201}, "Warning: High p95 latency detected. Actual: 201ms (Threshold: 200ms)"),
            ({"p99_latency_ms": 450}, "Warning: High p99 latency detected. Actual: 450ms (Threshold: 300ms)"),
            (
                {"average_latency_ms": 200},
                "Warning: High average latency detected. Actual: 200ms (Threshold: 100ms)",
            ),
            (
                {"evictions_per_minute": 5000},
                "Warning: High eviction rate detected. Actual: 5000 evictions/min "
                "(Threshold: 1000 evictions/min)",
            ),
        ],
    )
    def test_single_violation(self, manager: AlertManager, overrides: dict[str, object], expected: str) -> None:
        """Test each threshold violation message."""
        assert manager.evaluate(healthy_stats(**overrides)) == [expected]

    def test_values_at_threshold_do_not_alert(self, manager: AlertManager) -> None:
        """Test that values equal to a threshold do not alert."""
        stats = healthy_stats(
            hit_rate=0.5,
            miss_rate=0.5,
            p95_latency_ms=200,
            p99_latency_ms=300,
            average_latency_ms=100,
            evictions_per_minute=1000,
        )

        assert manager.evaluate(stats) == []

    def test_multiple_violations_produce_multiple_messages(self, manager: AlertManager) -> None:
        """Test one message per violated threshold."""
        stats = healthy_stats(hit_rate=0.2, miss_rate=0.8, average_latency_ms=500)

        messages = manager.evaluate(stats)

        assert len(messages) == 3

    def test_custom_thresholds(self, make_alert_config: Callable[..., AlertConfig]) -> None:
        """Test evaluation against custom thresholds."""
        manager = AlertManager(CacheMetrics(), make_alert_config(hit_rate_threshold=0.95))

        messages = manager.evaluate(healthy_stats())

        assert messages == ["Warning: Low hit rate detected. Actual: 0.9 (Threshold: 0.95)"]


class TestAlertChecks:
    """check_alerts() pulls metrics and notifies."""

    def test_low_hit_rate_notifies(
        self, make_alert_config: Callable[..., AlertConfig], received_alerts: list[str]
    ) -> None:
        """Test that a low hit rate notifies the callback."""
        metrics = CacheMetrics()
        for _ in range(9):
            metrics.record_miss()
        metrics.record_hit(timedelta(milliseconds=10))
        manager = AlertManager(metrics, make_alert_config())

        messages = manager.check_alerts()

        assert received_alerts == messages
        assert any("Low hit rate" in alert for alert in received_alerts)
        assert any("High miss rate" in alert for alert in received_alerts)

    def test_eviction_rate_uses_check_interval_as_window(
        self, make_alert_config: Callable[..., AlertConfig], received_alerts: list[str]
    ) -> None:
        """Test the eviction rate over the check interval."""
        metrics = CacheMetrics()
        metrics.record_hit(timedelta(milliseconds=1))
        for _ in range(500):
            metrics.record_eviction()
        manager = AlertManager(metrics, make_alert_config(alert_check_interval=timedelta(milliseconds=100)))

        manager.check_alerts()

        assert any("Warning: High eviction rate detected" in alert for alert in received_alerts)

    def test_latency_alerts(self, make_alert_config: Callable[..., AlertConfig], received_alerts: list[str]) -> None:
        """Test the latency alerts."""
        metrics = CacheMetrics()
        for i in range(20):
            metrics.record_hit(timedelta(milliseconds=i * 40))
        manager = AlertManager(metrics, make_alert_config())

        manager.check_alerts()

        assert any("High p95 latency" in alert for alert in received_alerts)
        assert any("High p99 latency" in alert for alert in received_alerts)
        assert any("High average latency" in alert for alert in received_alerts)

    def test_alerts_are_logged(
        self,
        make_alert_config: Callable[..., AlertConfig],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test that alerts are logged as warnings."""
        manager = AlertManager(CacheMetrics(), make_alert_config())

        with caplog.at_level(logging.WARNING, logger="cacherine.monitoring.alerts"):
            manager.check_alerts()

        assert "Low hit rate" in caplog.text

    def test_callback_failure_is_logged_not_raised(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that a failing callback is logged, not raised."""
        def failing_callback(message: str) -> None:
            raise RuntimeError("notification channel down")

        manager = AlertManager(
            CacheMetrics(),
            AlertConfig(notify_callback=failing_callback),
        )

        with caplog.at_level(logging.ERROR, logger="cacherine.monitoring.alerts"):
            messages = manager.check_alerts()

        assert messages
        assert "notification channel down" in caplog.text

    def test_one_failing_notification_does_not_block_others(self) -> None:
        """Test that one failed notification does not stop the rest."""
        delivered: list[str] = []

        def flaky_callback(message: str) -> None:
            if "hit rate" in message:
                raise RuntimeError("boom")
            delivered.append(message)

        metrics = CacheMetrics()
        metrics.record_miss()
        manager = AlertManager(metrics, AlertConfig(notify_callback=flaky_callback))

        manager.check_alerts()

        assert len(delivered) == 1
        assert "High miss rate" in delivered[0]


class TestAlertMonitoring:
    """Timer lifecycle."""

    async def test_triggers_alert_on_tick(
        self, make_alert_config: Callable[..., AlertConfig], received_alerts: list[str]
    ) -> None:
        """Test that the timer triggers alerts."""
        metrics = CacheMetrics()
        for _ in range(10):
            metrics.record_miss()
        metrics.record_hit(timedelta(milliseconds=10))
        manager = AlertManager(metrics, make_alert_config(alert_check_interval=FAST_INTERVAL))

        manager.monitor()
        try:
            await asyncio.sleep(0.2)
        finally:
            await manager.stop()

        assert any("Warning: Low hit rate detected" in alert for alert in received_alerts)

    async def test_checks_repeat_at_interval(
        self, make_alert_config: Callable[..., AlertConfig], received_alerts: list[str]
    ) -> None:
        """Test that checks repeat every interval."""
        # Empty metrics report a 0.0 hit rate, which alerts on every tick
        manager = AlertManager(CacheMetrics(), make_alert_config(alert_check_interval=FAST_INTERVAL))

        manager.monitor()
        try:
            await asyncio.sleep(0.35)
        finally:
            await manager.stop()

        assert len(received_alerts) >= 2

    async def test_no_alert_before_first_interval(
        self, make_alert_config: Callable[..., AlertConfig], received_alerts: list[str]
    ) -> None:
        """Test that no check runs before the first interval."""
        manager = AlertManager(CacheMetrics(), make_alert_config(alert_check_interval=timedelta(seconds=10)))

        manager.monitor()
        await asyncio.sleep(0.05)
        await manager.stop()

        assert received_alerts == []

    async def test_timer_survives_callback_failure(self) -> None:
        """Test that the timer keeps running after a callback failure."""
        calls: list[str] = []

        def failing_callback(message: str) -> None:
            calls.append(message)
            raise RuntimeError("boom")

        manager = AlertManager(
            CacheMetrics(),
            AlertConfig(notify_callback=failing_callback, alert_check_interval=FAST_INTERVAL),
        )

        manager.monitor()
        try:
            await asyncio.sleep(0.35)
            assert manager.is_monitoring is True
        finally:
            await manager.stop()

        assert len(calls) >= 2

    async def test_monitor_is_idempotent(self, quiet_alert_config: AlertConfig) -> None:
        """Test that monitor() is idempotent."""
        manager = AlertManager(CacheMetrics(), quiet_alert_config)

        manager.monitor()
        task = manager._task
        manager.monitor()

        assert manager._task is task
        await manager.stop()

    async def test_stop(self, quiet_alert_config: AlertConfig) -> None:
        """Test stopping and restarting monitoring."""
        manager = AlertManager(CacheMetrics(), quiet_alert_config)
        assert manager.is_monitoring is False

        manager.monitor()
        assert manager.is_monitoring is True

        await manager.stop()
        assert manager.is_monitoring is False

        # Stopping twice is harmless, and monitoring can be restarted
        await manager.stop()
        manager.monitor()
        assert manager.is_monitoring is True
        await manager.stop()

    def test_monitor_requires_running_loop(self, quiet_alert_config: AlertConfig) -> None:
        """Test that monitor() needs a running loop."""
        manager = AlertManager(CacheMetrics(), quiet_alert_config)

        with pytest.raises(RuntimeError):
            manager.monitor()
