"""Benchmark helper for overlay commit latency."""
from __future__ import annotations

import argparse
import random
import statistics
from dataclasses import dataclass
from time import perf_counter
from typing import Sequence

from mutable_string import MutableString, Range


@dataclass(slots=True)
class BenchmarkResult:
    label: str
    text_chars: int
    overlays: int
    runtime_ms: float
    output_chars: int


def _build_text(size: int) -> str:
    words = ("alpha", "beta", "gamma", "delta", "epsilon", "zeta")
    rng = random.Random(size)
    pieces: list[str] = []
    length = 0
    while length < size:
        word = rng.choice(words)
        pieces.append(word)
        length += len(word) + 1
    return " ".join(pieces)[:size]


def _queue_overlays(ms: MutableString, count: int, seed: int) -> None:
    length = len(ms)
    if count <= 0 or length == 0:
        return
    stride = max(1, length // count)
    rng = random.Random(seed)
    for index in range(0, length - stride + 1, stride)[:count]:
        width = rng.randint(0, stride)
        ms.replace_range(Range(index, index + width), "<edit>")


def run_case(label: str, text_chars: int, overlays: int, *, repeats: int) -> BenchmarkResult:
    text = _build_text(text_chars)
    timings: list[float] = []
    output_chars = 0
    for attempt in range(repeats):
        ms = MutableString(text)
        _queue_overlays(ms, overlays, seed=attempt)
        started = perf_counter()
        result = ms.commit()
        timings.append((perf_counter() - started) * 1000)
        output_chars = len(result.text)
    return BenchmarkResult(
        label=label,
        text_chars=len(text),
        overlays=overlays,
        runtime_ms=statistics.median(timings),
        output_chars=output_chars,
    )


def _default_cases() -> Sequence[tuple[str, int, int]]:
    return (
        ("small", 10_000, 100),
        ("medium", 1_000_000, 10_000),
        ("large", 5_000_000, 100_000),
    )


def _format_table(results: Sequence[BenchmarkResult]) -> str:
    header = f"{'case':<10}{'chars':>12}{'overlays':>10}{'median ms':>12}{'out chars':>12}"
    lines = [header, "-" * len(header)]
    for item in results:
        lines.append(
            f"{item.label:<10}{item.text_chars:>12}{item.overlays:>10}{item.runtime_ms:>12.2f}{item.output_chars:>12}"
        )
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Measure MutableString.commit latency")
    parser.add_argument("--repeats", type=int, default=5, help="Runs per case (median is reported)")
    parser.add_argument("--chars", type=int, help="Custom text size; requires --overlays")
    parser.add_argument("--overlays", type=int, help="Custom overlay count")
    args = parser.parse_args(argv)

    if args.chars is not None:
        cases: Sequence[tuple[str, int, int]] = (("custom", args.chars, args.overlays or 0),)
    else:
        cases = _default_cases()

    results = [run_case(label, chars, count, repeats=args.repeats) for label, chars, count in cases]
    print(_format_table(results))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
