"""ScanAccumulator: opt-in profiling for token streams.

This module provides accumulated metrics while scanning:
- Number of scans started
- Tokens emitted and matches skipped
- Characters consumed
- Scans that ended in an error

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from patlex.profiling import profiled_scan

    with profiled_scan() as metrics:
        tokens = lexer.tokenize("(1 + 2) * 3")

    print(metrics.summary())
    # {"total_ms": 0.1, "scans": 1, "tokens": 7, "skipped": 4, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics across the streams created in a profiled block.

    Attributes:
        start_time: Profiling start timestamp.
        scans: Number of TokenStreams created.
        tokens: Tokens emitted.
        skipped: Matches consumed without emitting a token.
        characters: Source characters consumed by matches.
        errors: Streams that ended with a LexError.

    """

    start_time: float = field(default_factory=perf_counter)
    scans: int = 0
    tokens: int = 0
    skipped: int = 0
    characters: int = 0
    errors: int = 0

    def record_scan(self) -> None:
        self.scans += 1

    def record_match(self, length: int, *, emitted: bool) -> None:
        """Record an accepted match.

        Args:
            length: Number of characters the match consumed.
            emitted: Whether the action produced a token.

        """
        self.characters += length
        if emitted:
            self.tokens += 1
        else:
            self.skipped += 1

    def record_error(self) -> None:
        self.errors += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics.

        Returns:
            Dict with total_ms, scans, tokens, skipped, characters, errors.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "scans": self.scans,
            "tokens": self.tokens,
            "skipped": self.skipped,
            "characters": self.characters,
            "errors": self.errors,
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled scanning.

    Streams created inside the block record into the yielded accumulator,
    including pulls made after the block exits.

    Yields:
        ScanAccumulator populated as streams are pulled.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
