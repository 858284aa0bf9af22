"""Smoke test for the commit latency benchmark script."""

from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

_SCRIPT = Path(__file__).resolve().parents[1] / "benchmarks" / "measure_commit_latency.py"


def _load_benchmark():
    spec = importlib.util.spec_from_file_location("measure_commit_latency", _SCRIPT)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    spec.loader.exec_module(module)
    return module


def test_run_case_commits_queued_overlays() -> None:
    benchmark = _load_benchmark()

    result = benchmark.run_case("tiny", 500, 20, repeats=2)

    assert result.text_chars == 500
    assert result.overlays == 20
    assert result.output_chars > 0
    assert result.runtime_ms >= 0


def test_main_prints_table(capsys) -> None:
    benchmark = _load_benchmark()

    assert benchmark.main(["--chars", "200", "--overlays", "5", "--repeats", "1"]) == 0

    out = capsys.readouterr().out
    assert "custom" in out
    assert "median ms" in out
