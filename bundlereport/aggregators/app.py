"""App router aggregator with nested layout/template merging."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Sequence, Tuple

from .base import RouteAggregator
from ..errors import ManifestMalformed
from ..logging import get_logger
from ..manifests import APP_PATH_ROUTES_MANIFEST, BuildManifests
from ..models import APP_ROUTER, DependencyRecord, GlobalBundle, RouteEntry, SizeMetric

_LOGGER = get_logger("aggregators.app")

PAGE_TYPE = "page"
DEPENDENCY_TYPES = frozenset({"layout", "template"})


def split_file_key(file_key: str) -> Tuple[str, str]:
    """Split ``/(marketing)/page`` into its location ``/(marketing)/`` and type ``page``."""
    file_type = file_key.split("/")[-1]
    return file_key[: len(file_key) - len(file_type)], file_type


def location_segments(dep_path: str) -> Tuple[str, ...]:
    return tuple(segment for segment in dep_path.split("/") if segment)


def is_ancestor(location: str, dep_path: str) -> bool:
    """Return True when ``location`` is ``dep_path`` or one of its parents in the route tree."""
    ancestor = location_segments(location)
    return location_segments(dep_path)[: len(ancestor)] == ancestor


@dataclass
class _PendingPage:
    route: str
    dep_path: str
    size: SizeMetric


class AppRouteAggregator(RouteAggregator):
    """Sizes app-router pages and merges their ancestor layouts into ``globalSize``.

    Entries of the app build manifest are keyed by route-tree location rather
    than public route. Layouts and templates are grouped by the location they
    sit at; each page then collects every group found at its own location or
    above it. Other file types (``route``, ``loading``, ``error``...) are ignored.
    """

    router = APP_ROUTER

    def supports(self, manifests: BuildManifests) -> bool:
        return manifests.app_mode

    def aggregate(
        self, manifests: BuildManifests, global_bundle: GlobalBundle
    ) -> Dict[str, RouteEntry]:
        if manifests.app_pages is None:
            return {}
        dependencies, pages = self._classify(
            manifests.app_pages, manifests.app_routes, global_bundle.app_scripts
        )

        results: Dict[str, RouteEntry] = {}
        for page in pages:
            records = self.ancestor_records(page.dep_path, dependencies)
            global_size = SizeMetric.total(record.size for record in records)
            results[page.route] = RouteEntry(
                size=page.size, router=self.router, global_size=global_size
            )
        _LOGGER.debug(
            "Sized %d app router routes against %d dependency locations",
            len(results),
            len(dependencies),
        )
        return results

    def _classify(
        self,
        app_pages: Mapping[str, Sequence[str]],
        app_routes: Mapping[str, str],
        baseline: Sequence[str],
    ) -> Tuple[Dict[str, List[DependencyRecord]], List[_PendingPage]]:
        dependencies: Dict[str, List[DependencyRecord]] = {}
        pages: List[_PendingPage] = []
        for file_key, scripts in app_pages.items():
            dep_path, file_type = split_file_key(file_key)
            if file_type in DEPENDENCY_TYPES:
                record = DependencyRecord(
                    dep_path=dep_path,
                    type=file_type,
                    size=self.net_size(scripts, baseline),
                )
                dependencies.setdefault(dep_path, []).append(record)
            elif file_type == PAGE_TYPE:
                route = app_routes.get(file_key)
                if route is None:
                    raise ManifestMalformed(
                        Path(APP_PATH_ROUTES_MANIFEST), f"no route registered for '{file_key}'"
                    )
                pages.append(
                    _PendingPage(route=route, dep_path=dep_path, size=self.net_size(scripts, baseline))
                )
            else:
                _LOGGER.debug("Skipping app entry %s of type %s", file_key, file_type)
        return dependencies, pages

    @staticmethod
    def ancestor_records(
        dep_path: str, dependencies: Mapping[str, Sequence[DependencyRecord]]
    ) -> List[DependencyRecord]:
        """Return records grouped at ``dep_path`` and at every parent location."""
        records: List[DependencyRecord] = []
        for location, grouped in dependencies.items():
            if is_ancestor(location, dep_path):
                records.extend(grouped)
        return records


__all__ = ["AppRouteAggregator", "is_ancestor", "location_segments", "split_file_key"]
