"""Resolution of the shared script baseline for each router."""

from __future__ import annotations

from ..logging import get_logger
from ..manifests import APP_WRAPPER_ROUTE, BuildManifests
from ..models import GlobalBundle, SizeMetric
from ..sizing import ScriptSizeCalculator

_LOGGER = get_logger("aggregators.global_bundle")


class GlobalBundleResolver:
    """Measures the scripts every route loads regardless of its content.

    In the pages router every page renders inside ``/_app``; in the app router
    every page loads the root main files.
    """

    def __init__(self, calculator: ScriptSizeCalculator) -> None:
        self._calculator = calculator

    def resolve(self, manifests: BuildManifests, app_mode: bool) -> GlobalBundle:
        pages_scripts = tuple(manifests.pages[APP_WRAPPER_ROUTE])
        app_scripts = tuple(manifests.root_main_files) if app_mode else ()

        pages_size = self._calculator.total_size(pages_scripts)
        app_size = self._calculator.total_size(app_scripts) if app_mode else SizeMetric.zero()
        _LOGGER.debug(
            "Global bundle: pages raw=%d gzip=%d, app raw=%d gzip=%d",
            pages_size.raw,
            pages_size.gzip,
            app_size.raw,
            app_size.gzip,
        )
        return GlobalBundle(
            pages=pages_size,
            app=app_size,
            pages_scripts=pages_scripts,
            app_scripts=app_scripts,
        )


__all__ = ["GlobalBundleResolver"]
