"""Benchmarks for classification, combinators and aggregators.

Run with: uv run pytest benchmarks/bench_combinators.py --benchmark-only -v
"""

from klaw_err import all, and_then, classify, map, partition, unwrap_or, values  # noqa: A004

# =============================================================================
# Classification benchmarks
# =============================================================================


class TestClassify:
    """Benchmark classify on each shape."""

    def test_classify_success(self, benchmark):
        benchmark(classify, ('ok', 42))

    def test_classify_multi_arity(self, benchmark):
        benchmark(classify, ('ok', 1, 2, 3))

    def test_classify_absent(self, benchmark):
        benchmark(classify, None)

    def test_classify_opaque(self, benchmark):
        benchmark(classify, {'key': 'value'})


# =============================================================================
# Combinator benchmarks
# =============================================================================


class TestCombinators:
    """Benchmark single-value combinators."""

    def test_map_success(self, benchmark):
        benchmark(map, ('ok', 5), lambda x: x * 2)

    def test_map_failure(self, benchmark):
        benchmark(map, ('error', 'boom'), lambda x: x * 2)

    def test_and_then_success(self, benchmark):
        benchmark(and_then, ('ok', 5), lambda x: ('ok', x * 2))

    def test_unwrap_or_absent(self, benchmark):
        benchmark(unwrap_or, None, 0)


# =============================================================================
# Aggregator benchmarks
# =============================================================================


class TestAggregators:
    """Benchmark list aggregators over 1000 elements."""

    def test_all_successes(self, benchmark):
        items = [('ok', i) for i in range(1000)]
        benchmark(all, items)

    def test_values_mixed(self, benchmark):
        items = [('ok', i) if i % 3 else None for i in range(1000)]
        benchmark(values, items)

    def test_partition_mixed(self, benchmark):
        items = [('ok', i) if i % 2 else ('error', i) for i in range(1000)]
        benchmark(partition, items)
