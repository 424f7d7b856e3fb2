#!/usr/bin/env python3
"""
vcardctl Benchmark Runner

Runs all benchmarks and produces a report.

Usage:
    python -m benchmarks.run           # Run all benchmarks
    python -m benchmarks.run --json    # JSON output
    python -m benchmarks.run --quick   # Reduced iterations
"""

import argparse
import json
import sys
import tempfile
from datetime import datetime
from pathlib import Path
from typing import NamedTuple

from . import bench_parsing, bench_serialize


class BenchmarkResult(NamedTuple):
    """Unified benchmark result."""

    category: str
    name: str
    iterations: int
    mean_ms: float
    std_ms: float
    min_ms: float
    max_ms: float


SUITES = (
    ("parsing", bench_parsing),
    ("serialization", bench_serialize),
)


def run_all_benchmarks(quick: bool = False) -> list[BenchmarkResult]:
    """Run all benchmark suites."""
    results: list[BenchmarkResult] = []

    with tempfile.TemporaryDirectory() as tmp:
        tmp_path = Path(tmp)

        for category, suite in SUITES:
            print(f"Running {category} benchmarks...", file=sys.stderr)
            for r in suite.run_all(tmp_path, quick=quick):
                results.append(BenchmarkResult(category, *r))

    return results


def format_table(results: list[BenchmarkResult]) -> str:
    """Format results as a markdown table."""
    lines = [
        "| Category | Benchmark | Mean (ms) | Std (ms) | Min | Max | Iterations |",
        "|----------|-----------|-----------|----------|-----|-----|------------|",
    ]

    for r in results:
        lines.append(
            f"| {r.category} | {r.name} | {r.mean_ms:.4f} | {r.std_ms:.4f} | "
            f"{r.min_ms:.4f} | {r.max_ms:.4f} | {r.iterations} |"
        )

    return "\n".join(lines)


def format_summary(results: list[BenchmarkResult]) -> str:
    """Format summary statistics by category."""
    categories: dict[str, list[float]] = {}
    for r in results:
        categories.setdefault(r.category, []).append(r.mean_ms)

    lines = [
        "",
        "## Summary by Category",
        "",
        "| Category | Benchmarks | Avg Mean (ms) | Total (ms) |",
        "|----------|------------|---------------|------------|",
    ]

    for cat, means in sorted(categories.items()):
        avg = sum(means) / len(means)
        total = sum(means)
        lines.append(f"| {cat} | {len(means)} | {avg:.4f} | {total:.4f} |")

    return "\n".join(lines)


def main():
    parser = argparse.ArgumentParser(description="vcardctl benchmark runner")
    parser.add_argument("--json", action="store_true", help="JSON output")
    parser.add_argument("--quick", action="store_true", help="Reduced iterations")
    parser.add_argument("--output", "-o", type=Path, help="Output file")
    args = parser.parse_args()

    results = run_all_benchmarks(quick=args.quick)

    if args.json:
        output = {
            "timestamp": datetime.now().isoformat(),
            "results": [r._asdict() for r in results],
        }
        text = json.dumps(output, indent=2)
    else:
        text = "\n".join([
            "# vcardctl Performance Benchmarks",
            "",
            f"**Generated**: {datetime.now().isoformat()}",
            "",
            "## Results",
            "",
            format_table(results),
            format_summary(results),
            "",
        ])

    if args.output:
        args.output.write_text(text)
        print(f"Results written to {args.output}", file=sys.stderr)
    else:
        print(text)


if __name__ == "__main__":
    main()
