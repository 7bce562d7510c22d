"""Configuration loading for bundlereport (package.json and .bundle-report.yml)."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".bundle-report.yml"
PACKAGE_JSON_KEY = "nextBundleAnalysis"
DEFAULT_BUILD_OUTPUT_DIRECTORY = ".next"
DEFAULT_REPORT_PATH = "analyze/__bundle_analysis.json"


class ConfigError(RuntimeError):
    """Raised when a configuration source cannot be parsed."""


@dataclass
class BundleReportConfig:
    """Resolved settings for one report run."""

    root: Path
    build_output_directory: str = DEFAULT_BUILD_OUTPUT_DIRECTORY
    report_path: str = DEFAULT_REPORT_PATH

    @property
    def build_dir(self) -> Path:
        return self.root / self.build_output_directory

    @property
    def report_file(self) -> Path:
        return self.build_dir / self.report_path


def load_config(
    project_root: Path,
    *,
    build_output_directory: Optional[str] = None,
    report_path: Optional[str] = None,
) -> BundleReportConfig:
    """Load configuration from disk, letting explicit arguments win."""
    root = project_root.expanduser().resolve()
    config = BundleReportConfig(root=root)

    options = _as_dict(_read_package_json(root / "package.json").get(PACKAGE_JSON_KEY))
    package_build_dir = _as_str(options.get("buildOutputDirectory"))
    if package_build_dir:
        config.build_output_directory = package_build_dir

    yaml_data = _read_yaml(root / CONFIG_FILENAME)
    yaml_build_dir = _as_str(yaml_data.get("build_output_directory"))
    if yaml_build_dir:
        config.build_output_directory = yaml_build_dir
    yaml_report_path = _as_str(yaml_data.get("report_path"))
    if yaml_report_path:
        config.report_path = yaml_report_path

    if build_output_directory:
        config.build_output_directory = build_output_directory
    if report_path:
        config.report_path = report_path

    return config


def _read_package_json(path: Path) -> Dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path.name} must contain an object at the root")
    return data


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.is_file():
        return {}
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    return loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value.strip() else None


__all__ = [
    "BundleReportConfig",
    "ConfigError",
    "DEFAULT_BUILD_OUTPUT_DIRECTORY",
    "DEFAULT_REPORT_PATH",
    "load_config",
]
