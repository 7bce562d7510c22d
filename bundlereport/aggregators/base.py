"""Base class for per-router size aggregators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Collection, Dict, Sequence

from ..manifests import BuildManifests
from ..models import GlobalBundle, RouteEntry, SizeMetric
from ..sizing import ScriptSizeCalculator


class RouteAggregator(ABC):
    """Contract for aggregators that size each route net of the shared bundle."""

    router: str

    def __init__(self, calculator: ScriptSizeCalculator) -> None:
        self._calculator = calculator

    def net_size(self, scripts: Sequence[str], baseline: Collection[str]) -> SizeMetric:
        """Size ``scripts`` after removing every script already in ``baseline``."""
        return self._calculator.total_size(self._calculator.exclude(scripts, baseline))

    @abstractmethod
    def supports(self, manifests: BuildManifests) -> bool:
        """Return True when the build contains routes for this router."""

    @abstractmethod
    def aggregate(
        self, manifests: BuildManifests, global_bundle: GlobalBundle
    ) -> Dict[str, RouteEntry]:
        """Return route entries keyed by public route name."""
