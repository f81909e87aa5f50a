"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_source() -> str:
    """Generate a large C-like source (~100KB)."""
    sections = []
    for i in range(1000):
        sections.append(f"""
// function {i}
int function_{i}(int a, int b) {{
    if (a >= b) {{ return a * {i} + 0x{i:x}; }}
    else {{ return b - "str{i}"; }}
}}
""")
    return "\n".join(sections)
