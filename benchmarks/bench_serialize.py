"""
Benchmarks for rendering parsed properties.

Measures:
- Canonical line rendering
- JSON record conversion used by `vcardctl parse --json`
"""

from pathlib import Path

from vcardctl.core.property import Property
from vcardctl.core.types import PropertyType

from .bench_parsing import (
    PARAMETERIZED_LINE,
    STRUCTURED_LINE,
    BenchmarkResult,
    _time_ms,
)


def bench_serialize_default(iterations: int = 5000) -> BenchmarkResult:
    """Benchmark rendering a freshly created property."""
    prop = Property.from_type(PropertyType.VERSION)

    def render():
        prop.serialize()

    return _time_ms(render, iterations=iterations, name="serialize_default")


def bench_serialize_parameterized(iterations: int = 5000) -> BenchmarkResult:
    """Benchmark rendering a property with several parameters."""
    prop = Property.parse(PARAMETERIZED_LINE)

    def render():
        prop.serialize()

    return _time_ms(render, iterations=iterations, name="serialize_parameterized")


def bench_round_trip(iterations: int = 2000) -> BenchmarkResult:
    """Benchmark parse followed by serialize."""
    def round_trip():
        Property.parse(STRUCTURED_LINE).serialize()

    return _time_ms(round_trip, iterations=iterations, name="round_trip_structured")


def bench_to_dict(iterations: int = 2000) -> BenchmarkResult:
    """Benchmark JSON record conversion."""
    prop = Property.parse(STRUCTURED_LINE)

    def convert():
        prop.to_dict()

    return _time_ms(convert, iterations=iterations, name="to_dict")


def run_all(tmp_path: Path | None = None, quick: bool = False) -> list[BenchmarkResult]:
    """Run all serialization benchmarks."""
    scale = 10 if quick else 1
    return [
        bench_serialize_default(5000 // scale),
        bench_serialize_parameterized(5000 // scale),
        bench_round_trip(2000 // scale),
        bench_to_dict(2000 // scale),
    ]


if __name__ == "__main__":
    results = run_all()
    print("\n=== Serialization Benchmarks ===\n")
    for r in results:
        print(f"{r.name}:")
        print(f"  mean: {r.mean_ms:.3f}ms (±{r.std_ms:.3f}ms)")
        print(f"  range: [{r.min_ms:.3f}ms, {r.max_ms:.3f}ms]")
        print(f"  iterations: {r.iterations}")
        print()
