#!/usr/bin/env python3
"""Benchmark script for fsview performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

SAMPLE = "only 90s kids understand / " * 400


def benchmark_import_time() -> float:
    """Measure import time of fsview package."""
    start = time.perf_counter()
    import fsview  # noqa: F401

    return time.perf_counter() - start


def benchmark_scan(iterations: int) -> float:
    """Measure size() + to_string() over a filtered view."""
    from fsview import FilteredStringView, any_of, is_char, is_digit

    view = FilteredStringView(SAMPLE, any_of(is_digit, is_char(" ")))

    start = time.perf_counter()
    for _ in range(iterations):
        view.size()
        view.to_string()
    return time.perf_counter() - start


def benchmark_cursor_walk(iterations: int) -> float:
    """Measure forward and reverse cursor iteration."""
    from fsview import FilteredStringView, is_alpha

    view = FilteredStringView(SAMPLE, is_alpha)

    start = time.perf_counter()
    for _ in range(iterations):
        for _char in view:
            pass
        for _char in reversed(view):
            pass
    return time.perf_counter() - start


def benchmark_split(iterations: int) -> float:
    """Measure split() on a long view."""
    from fsview import FilteredStringView, split

    view = FilteredStringView(SAMPLE)
    token = FilteredStringView(" / ")

    start = time.perf_counter()
    for _ in range(iterations):
        split(view, token)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run fsview benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=100,
        help="Iterations per benchmark",
    )
    args = parser.parse_args()

    results = [
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": benchmark_import_time(),
        },
        {
            "name": f"Scan ({args.iterations} iterations)",
            "unit": "seconds",
            "value": benchmark_scan(args.iterations),
        },
        {
            "name": f"Cursor Walk ({args.iterations} iterations)",
            "unit": "seconds",
            "value": benchmark_cursor_walk(args.iterations),
        },
        {
            "name": f"Split ({args.iterations} iterations)",
            "unit": "seconds",
            "value": benchmark_split(args.iterations),
        },
    ]

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
