"""
Result types for word frequency estimation.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CacheInfo:
    """Immutable snapshot of the estimator caches."""

    result_cache_size: int
    result_cache_capacity: int
    result_cache_hits: int
    result_cache_misses: int
    loaded_tables: int
    loaded_dictionaries: int
