"""CLI entrypoint for bundle-report."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError
from .errors import BuildOutputMissing, BundleReportError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bundle-report",
        description="Report per-route JavaScript bundle sizes from a Next.js build output.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    parser.add_argument(
        "--build-output-directory",
        default=None,
        help="Build output directory relative to the project root (defaults to .next).",
    )
    parser.add_argument(
        "--report-path",
        default=None,
        help="Report location relative to the build output directory.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for bundle-report."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    orchestrator = Orchestrator()
    try:
        orchestrator.run(
            args.path,
            build_output_directory=args.build_output_directory,
            report_path=args.report_path,
        )
    except BuildOutputMissing as exc:
        parser.exit(1, f"{exc}\n")
    except (BundleReportError, ConfigError) as exc:
        parser.exit(1, f"bundle-report failed: {exc}\nRun with --verbose for more details.\n")


if __name__ == "__main__":
    main(sys.argv[1:])
