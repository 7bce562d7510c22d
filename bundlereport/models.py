"""Core data models shared across bundlereport components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Tuple

PAGES_ROUTER = "pages"
APP_ROUTER = "app"


@dataclass(frozen=True)
class SizeMetric:
    """Raw and gzip byte counts for one or more scripts."""

    raw: int = 0
    gzip: int = 0

    def __post_init__(self) -> None:
        if self.raw < 0 or self.gzip < 0:
            raise ValueError(f"Size metrics must be non-negative, got raw={self.raw} gzip={self.gzip}")

    def __add__(self, other: object) -> SizeMetric:
        if not isinstance(other, SizeMetric):
            return NotImplemented
        return SizeMetric(raw=self.raw + other.raw, gzip=self.gzip + other.gzip)

    @classmethod
    def zero(cls) -> SizeMetric:
        return cls(raw=0, gzip=0)

    @classmethod
    def total(cls, metrics: Iterable[SizeMetric]) -> SizeMetric:
        """Sum metrics, seeded with the zero metric so empty input is valid."""
        result = cls.zero()
        for metric in metrics:
            result = result + metric
        return result

    def to_dict(self) -> Dict[str, int]:
        return {"raw": self.raw, "gzip": self.gzip}


@dataclass
class RouteEntry:
    """Size record emitted for one public route."""

    size: SizeMetric
    router: str
    global_size: Optional[SizeMetric] = None

    @property
    def raw(self) -> int:
        return self.size.raw

    @property
    def gzip(self) -> int:
        return self.size.gzip

    def to_dict(self) -> Dict[str, object]:
        data: Dict[str, object] = {
            "raw": self.raw,
            "gzip": self.gzip,
            "router": self.router,
        }
        if self.global_size is not None:
            data["globalSize"] = self.global_size.to_dict()
        return data


@dataclass(frozen=True)
class DependencyRecord:
    """Size of a layout or template file at one route-tree location."""

    dep_path: str
    type: str
    size: SizeMetric


@dataclass(frozen=True)
class GlobalBundle:
    """Shared baselines every route pays for, per router."""

    pages: SizeMetric
    app: SizeMetric
    pages_scripts: Tuple[str, ...] = field(default=(), compare=False)
    app_scripts: Tuple[str, ...] = field(default=(), compare=False)

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        return {"pages": self.pages.to_dict(), "app": self.app.to_dict()}


__all__ = [
    "APP_ROUTER",
    "DependencyRecord",
    "GlobalBundle",
    "PAGES_ROUTER",
    "RouteEntry",
    "SizeMetric",
]
