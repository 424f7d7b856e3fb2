"""
vcardctl Performance Benchmarks

Benchmarking suite covering:
- Parsing (single lines, whole .vcf files)
- Serialization (canonical rendering, JSON records)

Run with: python -m benchmarks.run
"""
