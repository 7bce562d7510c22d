"""In-memory cache of script sizes for a single report run."""

from __future__ import annotations

import gzip
from pathlib import Path
from typing import Callable, Dict

from ..errors import ScriptFileMissing
from ..logging import get_logger
from ..models import SizeMetric

_LOGGER = get_logger("stores.size_cache")

Compressor = Callable[[bytes], int]


def gzip_size(data: bytes) -> int:
    """Return the gzip-compressed length of ``data`` at maximum compression."""
    return len(gzip.compress(data, compresslevel=9))


class SizeCache:
    """Memoises raw and compressed sizes keyed by resolved script path.

    Bundles are shared between many routes, so each script is read and
    compressed at most once. Entries are never evicted; construct a new cache
    for every run.
    """

    def __init__(self, build_root: Path, *, compressor: Compressor = gzip_size) -> None:
        self._build_root = build_root
        self._compressor = compressor
        self._entries: Dict[Path, SizeMetric] = {}

    def size_of(self, script_path: str) -> SizeMetric:
        resolved = (self._build_root / script_path).resolve()
        cached = self._entries.get(resolved)
        if cached is not None:
            return cached

        try:
            text = resolved.read_bytes().decode("utf-8", errors="replace")
        except FileNotFoundError as exc:
            raise ScriptFileMissing(resolved) from exc
        payload = text.encode("utf-8")
        metric = SizeMetric(raw=len(payload), gzip=self._compressor(payload))
        self._entries[resolved] = metric
        _LOGGER.debug("Measured %s: raw=%d gzip=%d", script_path, metric.raw, metric.gzip)
        return metric

    def __contains__(self, script_path: object) -> bool:
        if not isinstance(script_path, str):
            return False
        return (self._build_root / script_path).resolve() in self._entries

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["Compressor", "SizeCache", "gzip_size"]
