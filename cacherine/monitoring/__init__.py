"""
cacherine — Monitoring Module

Metrics recording and threshold alerting for monitored caches.

Usage:
    from cacherine.monitoring import AlertConfig, AlertManager, CacheMetrics

    metrics = CacheMetrics()
    manager = AlertManager(metrics, AlertConfig(notify_callback=print))
    manager.monitor()  # inside a running event loop
"""

from .alerts import AlertManager
from .config import AlertConfig, NotifyCallback
from .metrics import CacheMetrics, RecentStats

__all__ = [
    "AlertConfig",
    "AlertManager",
    "CacheMetrics",
    "NotifyCallback",
    "RecentStats",
]
