"""
cacherine — Ephemeral FIFO Eviction Policy

FIFO eviction combined with one-shot reads: an entry is removed from the
cache as soon as it is read. Use FIFOPolicy when a key has to stay
readable more than once.
"""

from collections.abc import Hashable
from typing import Any

from .fifo import FIFOPolicy


class EphemeralFIFOPolicy(FIFOPolicy):
    """FIFO policy whose get() consumes the entry it returns."""

    name = "ephemeral_fifo"

    def get(self, key: Hashable) -> Any | None:
        # Consumed entries are not evictions
        return self._entries.pop(key, None)
