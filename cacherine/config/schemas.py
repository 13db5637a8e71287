"""
cacherine — Configuration Schemas

Defines typed configuration models using Pydantic for validation and type safety.
All environment-driven configuration is defined here and validated on load.
"""

from datetime import timedelta
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogLevel(str, Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class CachePolicy(str, Enum):
    """Supported eviction policies."""

    FIFO = "fifo"
    EPHEMERAL_FIFO = "ephemeral_fifo"
    LRU = "lru"
    MRU = "mru"
    LFU = "lfu"


class CacheConfig(BaseModel):
    """Cache configuration."""

    policy: CachePolicy = Field(default=CachePolicy.LRU, description="Eviction policy to use")
    capacity: int = Field(default=1000, ge=1, description="Max cache entries")
    monitored: bool = Field(default=False, description="Wrap the cache with metrics and threshold alerts")


class AlertThresholds(BaseModel):
    """Threshold values checked by the alert manager on every tick."""

    hit_rate_threshold: float = Field(default=0.5, ge=0.0, le=1.0, description="Alert when hit rate falls below")
    miss_rate_threshold: float = Field(default=0.5, ge=0.0, le=1.0, description="Alert when miss rate rises above")
    p95_latency_threshold_ms: int = Field(default=200, ge=0, description="p95 latency ceiling in milliseconds")
    p99_latency_threshold_ms: int = Field(default=300, ge=0, description="p99 latency ceiling in milliseconds")
    evictions_per_minute_threshold: int = Field(default=1000, ge=0, description="Eviction rate ceiling")
    average_latency_threshold_ms: int = Field(default=100, ge=0, description="Average latency ceiling in milliseconds")
    alert_check_interval: timedelta = Field(
        default=timedelta(minutes=1),
        description="Interval between threshold checks (also the eviction-rate window)",
    )

    @field_validator("alert_check_interval")
    @classmethod
    def validate_interval(cls, v: timedelta) -> timedelta:
        """Ensure the check interval is at least one millisecond."""
        if v < timedelta(milliseconds=1):
            raise ValueError("alert_check_interval must be at least 1 millisecond")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    json_format: bool = Field(default=False, description="Emit JSON log lines instead of plain text")


class CacherineConfig(BaseModel):
    """Root configuration for cacherine."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    alerts: AlertThresholds = Field(default_factory=AlertThresholds)

    model_config = ConfigDict(validate_assignment=True)
