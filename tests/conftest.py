"""
cacherine — Test Configuration and Shared Fixtures

Provides pytest configuration and shared fixtures for unit and integration tests.
"""

import os
from collections.abc import Callable, Generator
from datetime import timedelta

import pytest

from cacherine.monitoring import AlertConfig

# Set test environment
os.environ["LOG_LEVEL"] = "DEBUG"

_CONFIG_ENV_VARS = (
    "LOG_JSON",
    "CACHE_POLICY",
    "CACHE_CAPACITY",
    "CACHE_MONITORED",
    "ALERT_HIT_RATE_THRESHOLD",
    "ALERT_MISS_RATE_THRESHOLD",
    "ALERT_P95_LATENCY_THRESHOLD_MS",
    "ALERT_P99_LATENCY_THRESHOLD_MS",
    "ALERT_EVICTIONS_PER_MINUTE_THRESHOLD",
    "ALERT_AVERAGE_LATENCY_THRESHOLD_MS",
    "ALERT_CHECK_INTERVAL_SECONDS",
)


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test from default configuration values."""
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_singletons() -> Generator[None, None, None]:
    """Reset config and cache factory after each test to prevent state leakage."""
    yield
    from cacherine.cache.factory import reset_cache_factory
    from cacherine.config import reset_config

    reset_cache_factory()
    reset_config()


@pytest.fixture
def received_alerts() -> list[str]:
    """Collects messages passed to the alert callback."""
    return []


@pytest.fixture
def make_alert_config(received_alerts: list[str]) -> Callable[..., AlertConfig]:
    """Factory for alert configs that record notifications in received_alerts."""

    def _make(**overrides: object) -> AlertConfig:
        options: dict[str, object] = {"notify_callback": received_alerts.append}
        options.update(overrides)
        return AlertConfig(**options)

    return _make


@pytest.fixture
def quiet_alert_config() -> AlertConfig:
    """Alert config whose timer never fires during a test."""
    return AlertConfig(notify_callback=lambda _: None, alert_check_interval=timedelta(hours=1))
