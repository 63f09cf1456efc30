"""Benchmark tokenizing, narrowing and aligning source lines.

Run with:
    pytest benchmarks/benchmark_align.py -v --benchmark-only
"""

try:
    import pytest

    from linealign import Selection, align, align_lines, tokenize_line
    from linealign.formatter import ColumnAligner
    from linealign.narrowing import narrow

    @pytest.mark.benchmark(group="tokenize")
    def test_benchmark_tokenize_document(benchmark, large_document):
        """Benchmark tokenizing every line of a large document."""

        def tokenize_all():
            for line in large_document:
                tokenize_line(line)

        benchmark(tokenize_all)

    @pytest.mark.benchmark(group="narrow")
    def test_benchmark_narrow_large_block(benchmark, assignment_block):
        """Benchmark growing a range from the middle of a long block."""
        middle = len(assignment_block) // 2
        last = len(assignment_block) - 1

        result = benchmark(narrow, assignment_block, 0, last, middle)
        assert len(result) == len(assignment_block)

    @pytest.mark.benchmark(group="format")
    def test_benchmark_format_large_block(benchmark, assignment_block):
        """Benchmark column alignment of an already narrowed block."""
        line_range = narrow(assignment_block, 0, len(assignment_block) - 1, 0)
        aligner = ColumnAligner()

        benchmark(aligner.format, line_range)

    @pytest.mark.benchmark(group="align")
    def test_benchmark_align_cursor(benchmark, large_document):
        """Benchmark a single cursor alignment, the editor's common case."""
        benchmark(align, large_document, [Selection.at(2)])

    @pytest.mark.benchmark(group="align")
    def test_benchmark_align_whole_document(benchmark, large_document):
        """Benchmark aligning every block of a large document."""
        benchmark(align_lines, large_document)

except ImportError:
    pass  # pytest not available
