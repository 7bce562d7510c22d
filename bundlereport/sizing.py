"""Summing script sizes and filtering out shared scripts."""

from __future__ import annotations

from typing import Collection, Iterable, List, Sequence

from .models import SizeMetric
from .stores.size_cache import SizeCache


class ScriptSizeCalculator:
    """Combines per-script sizes from a :class:`SizeCache`."""

    def __init__(self, cache: SizeCache) -> None:
        self._cache = cache

    @property
    def cache(self) -> SizeCache:
        return self._cache

    def total_size(self, script_paths: Iterable[str]) -> SizeMetric:
        # A path listed twice is counted twice; the cache makes the repeat free.
        return SizeMetric.total(self._cache.size_of(path) for path in script_paths)

    @staticmethod
    def exclude(script_paths: Sequence[str], excluded: Collection[str]) -> List[str]:
        """Return ``script_paths`` without any entry present in ``excluded``."""
        excluded_set = set(excluded)
        return [path for path in script_paths if path not in excluded_set]


__all__ = ["ScriptSizeCalculator"]
