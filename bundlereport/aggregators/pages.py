"""Pages router aggregator."""

from __future__ import annotations

from typing import Dict

from .base import RouteAggregator
from ..logging import get_logger
from ..manifests import BuildManifests
from ..models import PAGES_ROUTER, GlobalBundle, RouteEntry

_LOGGER = get_logger("aggregators.pages")


class PagesRouteAggregator(RouteAggregator):
    """Sizes each pages-router route; pages have no nested dependencies."""

    router = PAGES_ROUTER

    def supports(self, manifests: BuildManifests) -> bool:
        return bool(manifests.pages)

    def aggregate(
        self, manifests: BuildManifests, global_bundle: GlobalBundle
    ) -> Dict[str, RouteEntry]:
        results: Dict[str, RouteEntry] = {}
        for route, scripts in manifests.pages.items():
            size = self.net_size(scripts, global_bundle.pages_scripts)
            results[route] = RouteEntry(size=size, router=self.router)
        _LOGGER.debug("Sized %d pages router routes", len(results))
        return results
