"""
cacherine — Configuration Module

Typed configuration loaded from environment variables and optional .env files.

Usage:
    from cacherine.config import get_config

    config = get_config()
    print(config.cache.policy, config.cache.capacity)
"""

from .loader import get_config, load_config, reset_config
from .schemas import (
    AlertThresholds,
    CacheConfig,
    CachePolicy,
    CacherineConfig,
    LoggingConfig,
    LogLevel,
)

__all__ = [
    # Loader
    "load_config",
    "get_config",
    "reset_config",
    # Schemas
    "CacherineConfig",
    "CacheConfig",
    "CachePolicy",
    "AlertThresholds",
    "LoggingConfig",
    "LogLevel",
]
