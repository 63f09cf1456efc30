"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_document() -> list[str]:
    """Generate a large C-like source file (~5000 lines) of alignable blocks."""
    lines: list[str] = []
    for i in range(250):
        lines.extend(
            [
                f"function section_{i}() {{",
                f"    var total_{i} = {i};",
                f"    var x = compute(a, b, {i}); // first",
                f"    var longer_name_{i} += x * 2; // second",
                "    counter = 0;",
                "",
                "    const options = {",
                f"        name: 'section {i}',",
                "        enabled: true,",
                f"        retries: {i % 5},",
                "        on_error: handler, // fallback",
                "    };",
                "",
                f"    self::ITEM_{i} => 'item',",
                "    self::OTHER => 'other',",
                "",
                "    return total;",
                "}",
                "",
                "",
            ]
        )
    return lines


@pytest.fixture
def assignment_block() -> list[str]:
    """A single 200-line block aligned on assignments."""
    return [f"{'v' * (i % 17 + 1)}_{i} = {i * 31}; // note {i}" for i in range(200)]
