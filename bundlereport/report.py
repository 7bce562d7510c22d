"""Merging router results into the final JSON report."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Dict, Mapping, Optional, TextIO

from .logging import get_logger
from .models import GlobalBundle, RouteEntry

GLOBAL_KEY = "__global"

_LOGGER = get_logger("report")


class ReportAssembler:
    """Builds, serialises and publishes the bundle analysis report."""

    def assemble(
        self,
        pages_result: Mapping[str, RouteEntry],
        app_result: Optional[Mapping[str, RouteEntry]],
        global_bundle: GlobalBundle,
    ) -> Dict[str, object]:
        merged: Dict[str, RouteEntry] = dict(pages_result)
        if app_result:
            collisions = sorted(set(merged).intersection(app_result))
            if collisions:
                _LOGGER.warning(
                    "App router routes override pages router routes: %s", ", ".join(collisions)
                )
            merged.update(app_result)

        report: Dict[str, object] = {route: entry.to_dict() for route, entry in merged.items()}
        report[GLOBAL_KEY] = global_bundle.to_dict()
        return report

    @staticmethod
    def serialise(report: Mapping[str, object]) -> str:
        return json.dumps(report, separators=(",", ":"))

    @staticmethod
    def write(raw_data: str, destination: Path) -> Path:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(raw_data, encoding="utf-8")
        _LOGGER.info("Wrote bundle analysis to %s", destination)
        return destination

    @staticmethod
    def emit(raw_data: str, stream: TextIO | None = None) -> None:
        """Echo the report so CI logs capture it."""
        target = stream if stream is not None else sys.stdout
        target.write(raw_data + "\n")
        target.flush()


__all__ = ["GLOBAL_KEY", "ReportAssembler"]
