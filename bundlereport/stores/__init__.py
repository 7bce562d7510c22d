"""Per-run stores."""

from .size_cache import SizeCache, gzip_size

__all__ = ["SizeCache", "gzip_size"]
