"""
cacherine — Alert Configuration

Immutable configuration for AlertManager: the notification callback plus
the threshold values shared with the environment-loaded AlertThresholds.
"""

from collections.abc import Callable

from pydantic import ConfigDict, Field

from ..config.schemas import AlertThresholds

NotifyCallback = Callable[[str], None]


class AlertConfig(AlertThresholds):
    """
    Configuration for cache performance alerts.

    Example:
        config = AlertConfig(
            notify_callback=print,
            hit_rate_threshold=0.8,
            alert_check_interval=timedelta(seconds=30),
        )
    """

    notify_callback: NotifyCallback = Field(description="Called once per violated threshold with a message")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_thresholds(
        cls,
        thresholds: AlertThresholds,
        notify_callback: NotifyCallback,
    ) -> "AlertConfig":
        """
        Build an AlertConfig from loaded thresholds.

        Args:
            thresholds: Threshold values (usually ``get_config().alerts``)
            notify_callback: Notification callback

        Returns:
            AlertConfig with the same thresholds
        """
        return cls(notify_callback=notify_callback, **thresholds.model_dump())
