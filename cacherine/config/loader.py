"""
cacherine — Configuration Loader

Loads and validates configuration from environment variables and .env files.
Provides a singleton configuration instance for the library.
"""

import logging
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError

from ..errors import ConfigurationError
from .schemas import CacherineConfig

logger = logging.getLogger(__name__)

_config_instance: CacherineConfig | None = None


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_number(name: str, default: str, cast: type[int] | type[float]) -> int | float:
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"Environment variable {name} must be a number, got {raw!r}",
            details={"env": name, "value": raw},
        ) from e


def _build_config_dict() -> dict[str, Any]:
    """Collect raw configuration values from the environment."""
    return {
        "logging": {
            "level": os.getenv("LOG_LEVEL", "INFO").upper(),
            "json_format": _env_bool("LOG_JSON"),
        },
        "cache": {
            "policy": os.getenv("CACHE_POLICY", "lru").lower(),
            "capacity": _env_number("CACHE_CAPACITY", "1000", int),
            "monitored": _env_bool("CACHE_MONITORED"),
        },
        "alerts": {
            "hit_rate_threshold": _env_number("ALERT_HIT_RATE_THRESHOLD", "0.5", float),
            "miss_rate_threshold": _env_number("ALERT_MISS_RATE_THRESHOLD", "0.5", float),
            "p95_latency_threshold_ms": _env_number("ALERT_P95_LATENCY_THRESHOLD_MS", "200", int),
            "p99_latency_threshold_ms": _env_number("ALERT_P99_LATENCY_THRESHOLD_MS", "300", int),
            "evictions_per_minute_threshold": _env_number("ALERT_EVICTIONS_PER_MINUTE_THRESHOLD", "1000", int),
            "average_latency_threshold_ms": _env_number("ALERT_AVERAGE_LATENCY_THRESHOLD_MS", "100", int),
            # Pydantic reads a number as seconds for timedelta fields
            "alert_check_interval": _env_number("ALERT_CHECK_INTERVAL_SECONDS", "60", float),
        },
    }


def load_config(
    env_file: str | None = None,
    reload: bool = False,
) -> CacherineConfig:
    """
    Load configuration from environment variables and .env file.

    Args:
        env_file: Path to .env file (default: .env in the working directory)
        reload: Force reload even if config already loaded

    Returns:
        Validated CacherineConfig instance

    Raises:
        ConfigurationError: If configuration is invalid
    """
    global _config_instance

    if _config_instance is not None and not reload:
        return _config_instance

    # Load .env file if exists
    if env_file:
        env_path = Path(env_file)
    else:
        env_path = Path.cwd() / ".env"

    if env_path.exists():
        logger.info("Loading environment from %s", env_path)
        load_dotenv(env_path, override=True)
    else:
        logger.debug("No .env file found, using environment variables only")

    config_dict = _build_config_dict()

    try:
        _config_instance = CacherineConfig(**config_dict)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False)
        logger.error(
            "Invalid cacherine configuration: %s",
            e,
            extra={"validation_errors": errors},
        )
        raise ConfigurationError(
            f"Invalid configuration: {e.error_count()} validation error(s)",
            details={"validation_errors": errors},
        ) from e

    logger.debug(
        "Configuration loaded",
        extra={
            "policy": _config_instance.cache.policy.value,
            "capacity": _config_instance.cache.capacity,
            "monitored": _config_instance.cache.monitored,
        },
    )
    return _config_instance


def get_config() -> CacherineConfig:
    """
    Get the current configuration, loading it on first use.

    Returns:
        Current CacherineConfig instance
    """
    if _config_instance is None:
        return load_config()
    return _config_instance


def reset_config() -> None:
    """
    Reset configuration singleton.

    Used for testing and hot-reload scenarios.
    """
    global _config_instance
    _config_instance = None
