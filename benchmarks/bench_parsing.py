"""
Benchmarks for property line parsing.

Measures:
- Parse time for simple, parameterized and structured lines
- Explicit-type parsing through Property.parse_value
- Reading and checking a whole .vcf file
"""

import statistics
import time
from pathlib import Path
from typing import NamedTuple

from vcardctl.commands.check import check_file
from vcardctl.core.property import Property
from vcardctl.core.types import PropertyType


class BenchmarkResult(NamedTuple):
    """Result of a single benchmark."""

    name: str
    iterations: int
    mean_ms: float
    std_ms: float
    min_ms: float
    max_ms: float


def _time_ms(func, iterations: int = 100, name: str | None = None) -> BenchmarkResult:
    """Time a function over multiple iterations."""
    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func()
        elapsed = (time.perf_counter() - start) * 1000
        times.append(elapsed)

    return BenchmarkResult(
        name=name or (func.__name__ if hasattr(func, "__name__") else "anonymous"),
        iterations=iterations,
        mean_ms=statistics.mean(times),
        std_ms=statistics.stdev(times) if len(times) > 1 else 0,
        min_ms=min(times),
        max_ms=max(times),
    )


SIMPLE_LINE = "FN:Simon Perreault"

PARAMETERIZED_LINE = 'TEL;VALUE=uri;TYPE="work,voice";PREF=1:tel:+1-418-656-9254;ext=102'

STRUCTURED_LINE = (
    "ADR;TYPE=HOME;TYPE=pref:;;1600 Pennsylvania Avenue NW;"
    "Washington;DC;20500;United States"
)

CARD_TEMPLATE = """\
BEGIN:VCARD
VERSION:4.0
FN:Contact {i}
N:Contact;{i};;;
EMAIL;TYPE=work:contact{i}@example.com
TEL;VALUE=uri;TYPE=cell:tel:+1-555-{i:04d}
ADR;TYPE=work:;;{i} Main Street;Springfield;;;
NOTE:Generated contact number {i}\\, used for benchmarking.\\n
 Folded onto a second line.
REV:20240101T000000Z
END:VCARD
"""


def _generate_vcf(num_cards: int = 200) -> str:
    """Generate a .vcf file with many cards for stress testing."""
    return "".join(CARD_TEMPLATE.format(i=i) for i in range(num_cards))


def bench_parse_simple(iterations: int = 5000) -> BenchmarkResult:
    """Benchmark parsing a plain text line."""
    def parse():
        Property.parse(SIMPLE_LINE)

    return _time_ms(parse, iterations=iterations, name="parse_simple")


def bench_parse_parameterized(iterations: int = 2000) -> BenchmarkResult:
    """Benchmark parsing a line with several parameters."""
    def parse():
        Property.parse(PARAMETERIZED_LINE)

    return _time_ms(parse, iterations=iterations, name="parse_parameterized")


def bench_parse_structured(iterations: int = 2000) -> BenchmarkResult:
    """Benchmark parsing a seven-component address."""
    def parse():
        Property.parse(STRUCTURED_LINE)

    return _time_ms(parse, iterations=iterations, name="parse_structured")


def bench_parse_value(iterations: int = 2000) -> BenchmarkResult:
    """Benchmark parsing with an explicit property type."""
    def parse():
        Property.parse_value(PropertyType.URL, "http://example.com:8080/path")

    return _time_ms(parse, iterations=iterations, name="parse_value")


def bench_check_file(tmp_path: Path, iterations: int = 20) -> BenchmarkResult:
    """Benchmark checking a 200-card file from disk."""
    vcf = tmp_path / "benchmark.vcf"
    vcf.write_text(_generate_vcf())

    def check():
        check_file(vcf)

    return _time_ms(check, iterations=iterations, name="check_file_200_cards")


def run_all(tmp_path: Path | None = None, quick: bool = False) -> list[BenchmarkResult]:
    """Run all parsing benchmarks."""
    scale = 10 if quick else 1
    results = [
        bench_parse_simple(5000 // scale),
        bench_parse_parameterized(2000 // scale),
        bench_parse_structured(2000 // scale),
        bench_parse_value(2000 // scale),
    ]

    if tmp_path:
        results.append(bench_check_file(tmp_path, max(2, 20 // scale)))

    return results


if __name__ == "__main__":
    import tempfile

    with tempfile.TemporaryDirectory() as tmp:
        results = run_all(Path(tmp))
        print("\n=== Parsing Benchmarks ===\n")
        for r in results:
            print(f"{r.name}:")
            print(f"  mean: {r.mean_ms:.3f}ms (±{r.std_ms:.3f}ms)")
            print(f"  range: [{r.min_ms:.3f}ms, {r.max_ms:.3f}ms]")
            print(f"  iterations: {r.iterations}")
            print()
