"""Tests for the per-run script size cache."""

from __future__ import annotations

import gzip

import pytest

from bundlereport.errors import ScriptFileMissing
from bundlereport.models import SizeMetric
from bundlereport.stores import SizeCache, gzip_size
from tests._fixtures.build_builder import BuildBuilder, CountingCompressor


def test_size_of_measures_raw_and_compressed(build_builder: BuildBuilder) -> None:
    build_builder.scripts({"static/chunks/a.js": 100})
    cache = SizeCache(build_builder.build_dir, compressor=CountingCompressor())

    assert cache.size_of("static/chunks/a.js") == SizeMetric(raw=100, gzip=50)


def test_size_of_reads_each_path_once(build_builder: BuildBuilder) -> None:
    build_builder.scripts({"a.js": 40})
    compressor = CountingCompressor()
    cache = SizeCache(build_builder.build_dir, compressor=compressor)

    first = cache.size_of("a.js")
    second = cache.size_of("a.js")

    assert first == second
    assert len(compressor.calls) == 1
    assert len(cache) == 1
    assert "a.js" in cache


def test_size_of_keys_on_resolved_path(build_builder: BuildBuilder) -> None:
    build_builder.scripts({"static/a.js": 10})
    compressor = CountingCompressor()
    cache = SizeCache(build_builder.build_dir, compressor=compressor)

    cache.size_of("static/a.js")
    cache.size_of("static/../static/a.js")

    assert len(compressor.calls) == 1


def test_size_of_counts_utf8_bytes(build_builder: BuildBuilder) -> None:
    build_builder.write_raw("unicode.js", "é" * 5)
    cache = SizeCache(build_builder.build_dir, compressor=CountingCompressor())

    assert cache.size_of("unicode.js").raw == 10


def test_size_of_missing_script_raises(build_builder: BuildBuilder) -> None:
    cache = SizeCache(build_builder.build_dir)

    with pytest.raises(ScriptFileMissing):
        cache.size_of("static/missing.js")


def test_gzip_size_matches_max_compression() -> None:
    payload = b"console.log('hello');" * 20

    assert gzip_size(payload) == len(gzip.compress(payload, compresslevel=9))
    assert gzip_size(payload) < len(payload)


def test_size_of_keeps_crlf_line_endings(build_builder: BuildBuilder) -> None:
    (build_builder.build_dir / "crlf.js").write_bytes(b"a();\r\nb();\r\n")
    compressor = CountingCompressor()
    cache = SizeCache(build_builder.build_dir, compressor=compressor)

    assert cache.size_of("crlf.js").raw == 12
    assert compressor.calls == [b"a();\r\nb();\r\n"]


def test_size_of_keeps_lone_carriage_returns(build_builder: BuildBuilder) -> None:
    (build_builder.build_dir / "cr.js").write_bytes(b"a();\rb();\r")
    cache = SizeCache(build_builder.build_dir, compressor=CountingCompressor())

    assert cache.size_of("cr.js").raw == 10
