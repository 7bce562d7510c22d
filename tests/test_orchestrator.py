"""Tests for bundlereport.orchestrator."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from bundlereport.errors import BuildOutputMissing, ScriptFileMissing
from bundlereport.orchestrator import Orchestrator
from tests._fixtures.build_builder import BuildBuilder, CountingCompressor, length_compressor


def _pages_build(builder: BuildBuilder) -> None:
    builder.scripts({"a.js": 100, "b.js": 50, "c.js": 30})
    builder.pages({"/_app": ["a.js", "b.js"], "/about": ["a.js", "c.js"]})


def test_run_pages_only_build(build_builder: BuildBuilder) -> None:
    _pages_build(build_builder)
    stdout = io.StringIO()
    orchestrator = Orchestrator(
        compressor=length_compressor({100: 40, 50: 20, 30: 10}), stdout=stdout
    )

    outcome = orchestrator.run(str(build_builder.root))

    assert outcome.report == {
        "/_app": {"raw": 0, "gzip": 0, "router": "pages"},
        "/about": {"raw": 30, "gzip": 10, "router": "pages"},
        "__global": {"pages": {"raw": 150, "gzip": 60}, "app": {"raw": 0, "gzip": 0}},
    }
    assert outcome.path == build_builder.build_dir.resolve() / "analyze" / "__bundle_analysis.json"
    assert outcome.path.read_text(encoding="utf-8") == outcome.raw_data
    assert stdout.getvalue() == outcome.raw_data + "\n"


def test_run_app_build_merges_both_routers(build_builder: BuildBuilder) -> None:
    build_builder.scripts(
        {"app.js": 10, "main.js": 9, "layout.js": 20, "page.js": 15, "home.js": 12}
    )
    build_builder.pages({"/_app": ["app.js"], "/legacy": ["app.js"]}, root_main_files=["main.js"])
    build_builder.app(
        {
            "/(m)/layout": ["main.js", "layout.js"],
            "/(m)/page": ["main.js", "page.js"],
            "/page": ["main.js", "home.js"],
        },
        {"/(m)/page": "/marketing", "/page": "/"},
    )
    orchestrator = Orchestrator(
        compressor=length_compressor({10: 5, 9: 4, 20: 8, 15: 6, 12: 5}), stdout=io.StringIO()
    )

    outcome = orchestrator.run(str(build_builder.root))

    assert list(outcome.report) == ["/_app", "/legacy", "/marketing", "/", "__global"]
    assert outcome.report["/marketing"] == {
        "raw": 15,
        "gzip": 6,
        "router": "app",
        "globalSize": {"raw": 20, "gzip": 8},
    }
    assert outcome.report["/"]["globalSize"] == {"raw": 0, "gzip": 0}
    assert outcome.report["__global"] == {
        "pages": {"raw": 10, "gzip": 5},
        "app": {"raw": 9, "gzip": 4},
    }
    assert "depPath" not in json.dumps(outcome.report)


def test_run_is_deterministic(build_builder: BuildBuilder) -> None:
    _pages_build(build_builder)

    first = Orchestrator(stdout=io.StringIO()).run(str(build_builder.root))
    second = Orchestrator(stdout=io.StringIO()).run(str(build_builder.root))

    assert first.raw_data == second.raw_data


def test_each_run_uses_a_fresh_cache(build_builder: BuildBuilder) -> None:
    _pages_build(build_builder)
    compressor = CountingCompressor()
    orchestrator = Orchestrator(compressor=compressor, stdout=io.StringIO())

    orchestrator.run(str(build_builder.root))
    orchestrator.run(str(build_builder.root))

    assert len(compressor.calls) == 6


def test_run_respects_build_output_directory_option(tmp_path: Path) -> None:
    builder = BuildBuilder(tmp_path, build_dir="out")
    _pages_build(builder)

    outcome = Orchestrator(stdout=io.StringIO()).run(
        str(builder.root), build_output_directory="out", report_path="sizes.json"
    )

    assert outcome.path == builder.build_dir.resolve() / "sizes.json"


def test_missing_build_output_raises(tmp_path: Path) -> None:
    with pytest.raises(BuildOutputMissing, match="No build output found"):
        Orchestrator(stdout=io.StringIO()).run(str(tmp_path))


def test_missing_script_writes_no_report(build_builder: BuildBuilder) -> None:
    build_builder.scripts({"a.js": 10})
    build_builder.pages({"/_app": ["a.js"], "/gone": ["missing.js"]})
    stdout = io.StringIO()

    with pytest.raises(ScriptFileMissing):
        Orchestrator(stdout=stdout).run(str(build_builder.root))

    assert not (build_builder.build_dir / "analyze").exists()
    assert stdout.getvalue() == ""
