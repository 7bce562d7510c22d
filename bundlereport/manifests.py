"""Loading of the build manifests a report run consumes."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .errors import ManifestMalformed, ManifestMissing
from .logging import get_logger

BUILD_MANIFEST = "build-manifest.json"
APP_BUILD_MANIFEST = "app-build-manifest.json"
APP_PATH_ROUTES_MANIFEST = "app-path-routes-manifest.json"

# `_app` wraps every page in the pages router.
APP_WRAPPER_ROUTE = "/_app"

_LOGGER = get_logger("manifests")


@dataclass
class BuildManifests:
    """The subset of build output metadata used by the aggregators."""

    pages: Dict[str, List[str]]
    root_main_files: List[str] = field(default_factory=list)
    app_pages: Optional[Dict[str, List[str]]] = None
    app_routes: Dict[str, str] = field(default_factory=dict)

    @property
    def app_mode(self) -> bool:
        return self.app_pages is not None


def has_app_router(build_dir: Path) -> bool:
    """Return True when the build produced an app router manifest."""
    return (build_dir / APP_BUILD_MANIFEST).exists()


def load_manifests(build_dir: Path) -> BuildManifests:
    """Read the pages manifest and, when present, the app router manifests."""
    build_path = build_dir / BUILD_MANIFEST
    build_meta = _as_object(_read_json(build_path), build_path)
    pages = _script_mapping(build_meta.get("pages"), build_path, "pages")
    if APP_WRAPPER_ROUTE not in pages:
        raise ManifestMalformed(build_path, f"missing '{APP_WRAPPER_ROUTE}' entry in 'pages'")

    manifests = BuildManifests(pages=pages)
    if not has_app_router(build_dir):
        _LOGGER.debug("No %s found; pages router only", APP_BUILD_MANIFEST)
        return manifests

    manifests.root_main_files = _script_list(
        build_meta.get("rootMainFiles", []), build_path, "rootMainFiles"
    )

    app_build_path = build_dir / APP_BUILD_MANIFEST
    app_meta = _as_object(_read_json(app_build_path), app_build_path)
    manifests.app_pages = _script_mapping(app_meta.get("pages"), app_build_path, "pages")

    routes_path = build_dir / APP_PATH_ROUTES_MANIFEST
    routes_meta = _as_object(_read_json(routes_path), routes_path)
    app_routes: Dict[str, str] = {}
    for key, route in routes_meta.items():
        if not isinstance(route, str):
            raise ManifestMalformed(routes_path, f"route for '{key}' must be a string")
        app_routes[key] = route
    manifests.app_routes = app_routes

    _LOGGER.debug(
        "Loaded %d pages entries and %d app entries",
        len(manifests.pages),
        len(manifests.app_pages),
    )
    return manifests


def _read_json(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ManifestMissing(path) from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestMalformed(path, str(exc)) from exc


def _as_object(value: Any, path: Path) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ManifestMalformed(path, "expected a JSON object at the root")
    return value


def _script_mapping(value: Any, path: Path, field_name: str) -> Dict[str, List[str]]:
    if not isinstance(value, dict):
        raise ManifestMalformed(path, f"'{field_name}' must be an object")
    return {
        key: _script_list(scripts, path, f"{field_name}.{key}")
        for key, scripts in value.items()
    }


def _script_list(value: Any, path: Path, field_name: str) -> List[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ManifestMalformed(path, f"'{field_name}' must be a list of script paths")
    return list(value)


__all__ = [
    "APP_BUILD_MANIFEST",
    "APP_PATH_ROUTES_MANIFEST",
    "APP_WRAPPER_ROUTE",
    "BUILD_MANIFEST",
    "BuildManifests",
    "has_app_router",
    "load_manifests",
]
