"""Per-router size aggregators and discovery utilities."""

from __future__ import annotations

from typing import List

from .app import AppRouteAggregator
from .base import RouteAggregator
from .global_bundle import GlobalBundleResolver
from .pages import PagesRouteAggregator
from ..sizing import ScriptSizeCalculator


def build_aggregators(calculator: ScriptSizeCalculator) -> List[RouteAggregator]:
    """Return aggregators in merge order; later results win on route collisions."""
    return [PagesRouteAggregator(calculator), AppRouteAggregator(calculator)]


__all__ = [
    "AppRouteAggregator",
    "GlobalBundleResolver",
    "PagesRouteAggregator",
    "RouteAggregator",
    "build_aggregators",
]
