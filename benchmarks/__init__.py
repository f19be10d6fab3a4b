"""sprig benchmarks (pytest-benchmark)."""
