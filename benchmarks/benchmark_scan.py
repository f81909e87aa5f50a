"""Benchmark patlex against a single combined ``re`` alternation.

The combined regex is leftmost-first, not longest-match, so keywords must be
ordered carefully and it cannot express the tie-break policy; it is here as
a lower bound on scanning cost, not as an equivalent.

Run with:
    pytest benchmarks/benchmark_scan.py -v --benchmark-only

Or for quick comparison:
    python benchmarks/benchmark_scan.py
"""

import re
import time

RULES: list[tuple[str, str | None]] = [
    (r"if|else|return|int", "KEYWORD"),
    (r"[A-Za-z_][A-Za-z0-9_]*", "IDENT"),
    (r"0x[0-9a-f]+|[0-9]+", "NUMBER"),
    (r'"[^"\n]*"', "STRING"),
    (r">=|<=|==|[-+*/<>=]", "OP"),
    (r"[(){};,]", "PUNCT"),
    (r"//[^\n]*", None),
    (r"\s+", None),
]


def build_patlex():
    from patlex import LexerBuilder

    builder = LexerBuilder()
    for pattern, kind in RULES:
        builder.token(pattern, lambda _, k=kind: k)
    return builder.build()


def combined_regex_tokenize(source: str) -> list[str]:
    """Reference tokenizer: one alternation with named groups."""
    parts = [f"(?P<r{i}>{pattern})" for i, (pattern, _) in enumerate(RULES)]
    combined = re.compile("|".join(parts))
    kinds = []
    for m in combined.finditer(source):
        kind = RULES[int(m.lastgroup[1:])][1]
        if kind is not None:
            kinds.append(kind)
    return kinds


def generate_source(n: int = 1000) -> str:
    return "\n".join(
        f"int f{i}(int a) {{ if (a >= {i}) {{ return a * 0x{i:x}; }} // c{i}\n}}" for i in range(n)
    )


def benchmark(fn, source: str, iterations: int = 5) -> float:
    fn(source)  # warmup
    start = time.perf_counter()
    for _ in range(iterations):
        fn(source)
    return (time.perf_counter() - start) / iterations


def main() -> None:
    """Run benchmarks and print results."""
    source = generate_source()
    lexer = build_patlex()
    print(f"Source: {len(source):,} characters, {len(RULES)} rules\n")

    patlex_time = benchmark(lambda s: list(lexer.tokens(s)), source)
    regex_time = benchmark(combined_regex_tokenize, source)

    print(f"patlex:          {patlex_time * 1000:8.2f} ms")
    print(f"combined regex:  {regex_time * 1000:8.2f} ms")
    print(f"ratio:           {patlex_time / regex_time:8.1f}x")


# pytest-benchmark integration
try:
    import pytest

    @pytest.mark.benchmark(group="scan")
    def test_benchmark_patlex(benchmark, large_source):
        """Benchmark patlex on a large generated source."""
        lexer = build_patlex()
        benchmark(lambda: list(lexer.tokens(large_source)))

    @pytest.mark.benchmark(group="scan")
    def test_benchmark_combined_regex(benchmark, large_source):
        """Benchmark the combined-alternation reference tokenizer."""
        benchmark(lambda: combined_regex_tokenize(large_source))

except ImportError:
    pass


if __name__ == "__main__":
    main()
