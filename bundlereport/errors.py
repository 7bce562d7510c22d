"""Error taxonomy for report runs."""

from __future__ import annotations

from pathlib import Path


class BundleReportError(RuntimeError):
    """Base class for fatal conditions that abort a report run."""


class BuildOutputMissing(BundleReportError):
    """Raised when the build output directory cannot be read."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f'No build output found at "{path}" - you may not have your working directory '
            'set correctly, or not have run "next build".'
        )


class ManifestMissing(BundleReportError):
    """Raised when a required manifest file is absent."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Required manifest not found: {path}")


class ManifestMalformed(BundleReportError):
    """Raised when a manifest cannot be parsed or lacks a required field."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Malformed manifest {path}: {reason}")


class ScriptFileMissing(BundleReportError):
    """Raised when a manifest references a script that is not on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Script referenced by manifest does not exist: {path}")


__all__ = [
    "BuildOutputMissing",
    "BundleReportError",
    "ManifestMalformed",
    "ManifestMissing",
    "ScriptFileMissing",
]
