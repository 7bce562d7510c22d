"""Pipeline orchestration for a single bundle report run."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, TextIO

from .aggregators import GlobalBundleResolver, build_aggregators
from .config import BundleReportConfig, load_config
from .errors import BuildOutputMissing
from .logging import get_logger
from .manifests import load_manifests
from .models import APP_ROUTER, PAGES_ROUTER, RouteEntry
from .report import ReportAssembler
from .sizing import ScriptSizeCalculator
from .stores.size_cache import Compressor, SizeCache, gzip_size


@dataclass
class ReportOutcome:
    """Result of a report run."""

    path: Path
    raw_data: str
    report: Dict[str, object]


class Orchestrator:
    """Coordinates manifest loading, aggregation and report publishing."""

    def __init__(
        self,
        assembler: ReportAssembler | None = None,
        compressor: Compressor = gzip_size,
        stdout: TextIO | None = None,
    ) -> None:
        self.assembler = assembler or ReportAssembler()
        self.logger = get_logger("orchestrator")
        self._compressor = compressor
        self._stdout = stdout

    def run(
        self,
        path: str,
        *,
        build_output_directory: Optional[str] = None,
        report_path: Optional[str] = None,
    ) -> ReportOutcome:
        """Measure the build under ``path`` and write its bundle report."""
        config = load_config(
            Path(path),
            build_output_directory=build_output_directory,
            report_path=report_path,
        )
        return self.run_with_config(config)

    def run_with_config(self, config: BundleReportConfig) -> ReportOutcome:
        build_dir = config.build_dir
        self.logger.info("Starting bundle report for %s", build_dir)
        if not build_dir.is_dir() or not os.access(build_dir, os.R_OK):
            raise BuildOutputMissing(build_dir)

        manifests = load_manifests(build_dir)
        calculator = ScriptSizeCalculator(SizeCache(build_dir, compressor=self._compressor))
        global_bundle = GlobalBundleResolver(calculator).resolve(manifests, manifests.app_mode)

        results: Dict[str, Dict[str, RouteEntry]] = {}
        for aggregator in build_aggregators(calculator):
            if aggregator.supports(manifests):
                results[aggregator.router] = aggregator.aggregate(manifests, global_bundle)
        self.logger.debug("Measured %d unique scripts", len(calculator.cache))

        report = self.assembler.assemble(
            results.get(PAGES_ROUTER, {}), results.get(APP_ROUTER), global_bundle
        )
        raw_data = self.assembler.serialise(report)
        destination = self.assembler.write(raw_data, config.report_file)
        self.assembler.emit(raw_data, self._stdout)
        return ReportOutcome(path=destination, raw_data=raw_data, report=report)


__all__ = ["Orchestrator", "ReportOutcome"]
