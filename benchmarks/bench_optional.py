"""Benchmarks for Optional type.

Run with: uv run pytest benchmarks/ --benchmark-only -v
"""

from klaw_optional import INT, STR


# =============================================================================
# Creation benchmarks
# =============================================================================


class TestOptionalCreation:
    """Benchmark Optional creation."""

    def test_of(self, benchmark):
        """Benchmark validated Present creation."""
        benchmark(INT.of, 42)

    def test_of_nullable_none(self, benchmark):
        """Benchmark of_nullable(None), which hits the empty cache."""
        benchmark(INT.of_nullable, None)

    def test_of_empty(self, benchmark):
        """Benchmark cached empty access."""
        benchmark(INT.of_empty)


# =============================================================================
# Method call benchmarks
# =============================================================================


class TestOptionalMethods:
    """Benchmark Optional method calls."""

    def test_present_map(self, benchmark):
        """Benchmark Present.map."""
        opt = INT.of(5)
        benchmark(opt.map, lambda x: x * 2)

    def test_present_map_other_kind(self, benchmark):
        """Benchmark Present.map into another kind."""
        opt = INT.of(5)
        benchmark(opt.map, str, STR)

    def test_absent_map(self, benchmark):
        """Benchmark Absent.map."""
        benchmark(INT.of_empty().map, lambda x: x * 2)

    def test_present_flat_map(self, benchmark):
        """Benchmark Present.flat_map."""
        opt = INT.of(5)
        benchmark(opt.flat_map, lambda x: INT.of(x * 2))

    def test_present_filter(self, benchmark):
        """Benchmark Present.filter."""
        opt = INT.of(5)
        benchmark(opt.filter, lambda x: x > 3)

    def test_absent_or_else(self, benchmark):
        """Benchmark Absent.or_else, which validates the fallback."""
        benchmark(INT.of_empty().or_else, 0)

    def test_present_or_else(self, benchmark):
        """Benchmark Present.or_else."""
        benchmark(INT.of(5).or_else, 0)


# =============================================================================
# Chain benchmarks
# =============================================================================


class TestOptionalChains:
    """Benchmark realistic combinator chains."""

    def test_chain(self, benchmark):
        """Benchmark filter -> map -> or_else."""

        def chain():
            return INT.of(10).filter(lambda x: x > 5).map(lambda x: x + 1).or_else(0)

        benchmark(chain)
