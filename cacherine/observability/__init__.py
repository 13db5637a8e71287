"""
cacherine — Observability Module

Logging setup for applications embedding cacherine. Cache performance
metrics live in cacherine.monitoring.
"""

from .logging import LOGGER_NAME, JSONFormatter, configure_logging

__all__ = [
    "LOGGER_NAME",
    "JSONFormatter",
    "configure_logging",
]
