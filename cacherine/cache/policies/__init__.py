"""
cacherine — Eviction Policies

Single-threaded eviction policy implementations. Each one can be used
directly as a non-thread-safe cache, or wrapped by ThreadSafeCache.
"""

from .base import EvictionListener, EvictionPolicy
from .ephemeral_fifo import EphemeralFIFOPolicy
from .fifo import FIFOPolicy
from .lfu import LFUPolicy
from .lru import LRUPolicy
from .mru import MRUPolicy

__all__ = [
    "EvictionListener",
    "EvictionPolicy",
    "FIFOPolicy",
    "EphemeralFIFOPolicy",
    "LRUPolicy",
    "MRUPolicy",
    "LFUPolicy",
]
