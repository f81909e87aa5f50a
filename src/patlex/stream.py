"""TokenStream: lazy, single-pass scanning over one source string.

State machine:

    SCANNING --(cursor == len(source))--> DONE
    SCANNING --(no match / zero-width match / action raised)--> ERRORED

DONE and ERRORED are terminal. Pulling in a terminal state returns None
(end of stream) any number of times; a new scan is needed to tokenize again.

Skipped matches are consumed in a loop inside pull(), so long runs of
whitespace or comments never grow the stack.

Thread Safety:
A TokenStream carries a mutable cursor. Drive it from a single consumer.
The source and the PatternSet are only read, so any number of streams can
share them.

"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum, auto
from typing import TYPE_CHECKING

from patlex.errors import NoMatchingRuleError, ZeroWidthMatchError
from patlex.location import Span
from patlex.profiling import get_scan_accumulator
from patlex.tokens import Token
from patlex.utils.logger import get_logger

if TYPE_CHECKING:
    from patlex.patterns import PatternSet
    from patlex.profiling import ScanAccumulator

logger = get_logger(__name__)


class StreamState(Enum):
    """Lifecycle state of a TokenStream."""

    SCANNING = auto()
    DONE = auto()
    ERRORED = auto()


class TokenStream[K]:
    """Iterator over the tokens of one source string.

    Usage:
            >>> stream = lexer.scan("12 ab")
            >>> stream.pull()
        Token('A', [0, 2))
            >>> list(stream)
        [Token('B', [3, 5))]
            >>> stream.pull() is None
        True

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_patterns",
        "_cursor",
        "_state",
        "_accumulator",
    )

    def __init__(self, source: str, patterns: PatternSet[K]) -> None:
        """Bind a source to a pattern set with the cursor at offset 0.

        Args:
            source: Text to tokenize
            patterns: Compiled rules to match with
        """
        self._source = source
        self._source_len = len(source)
        self._patterns = patterns
        self._cursor = 0
        self._state = StreamState.SCANNING

        # Captured once; None when profiling is disabled
        self._accumulator: ScanAccumulator | None = get_scan_accumulator()
        if self._accumulator is not None:
            self._accumulator.record_scan()

    @property
    def source(self) -> str:
        return self._source

    @property
    def cursor(self) -> int:
        """Offset of the next character to be matched."""
        return self._cursor

    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def remaining(self) -> str:
        """Source text not yet consumed."""
        return self._source[self._cursor :]

    def pull(self) -> Token[K] | None:
        """Produce the next token.

        Returns:
            The next Token, or None at end of stream. Once None has been
            returned, or an error raised, every later pull returns None.

        Raises:
            NoMatchingRuleError: If no rule matches at the cursor
            ZeroWidthMatchError: If the winning rule matched the empty string
            RuntimeError: If a rule action raises StopIteration
            Exception: Whatever else a rule action raises, unchanged
        """
        if self._state is not StreamState.SCANNING:
            return None

        source = self._source
        patterns = self._patterns
        acc = self._accumulator

        while self._cursor < self._source_len:
            start = self._cursor
            match = patterns.best_match(source, start)

            if match is None:
                self._fail()
                raise NoMatchingRuleError(start, source)

            end = match.end
            if end == start:
                self._fail()
                raise ZeroWidthMatchError(match.rule_index, start, source)

            try:
                kind = patterns[match.rule_index].action(source[start:end])
            except StopIteration as err:
                # StopIteration must not escape through __next__
                self._fail()
                msg = f"Rule {match.rule_index} action raised StopIteration"
                raise RuntimeError(msg) from err
            except BaseException:
                self._fail()
                raise

            self._cursor = end
            if acc is not None:
                acc.record_match(end - start, emitted=kind is not None)

            if kind is not None:
                return Token(kind, Span(start, end))

        self._state = StreamState.DONE
        return None

    def _fail(self) -> None:
        self._state = StreamState.ERRORED
        if self._accumulator is not None:
            self._accumulator.record_error()
        logger.debug("Scan stopped at offset %d", self._cursor)

    def __iter__(self) -> Iterator[Token[K]]:
        return self

    def __next__(self) -> Token[K]:
        token = self.pull()
        if token is None:
            raise StopIteration
        return token

    def __repr__(self) -> str:
        return (
            f"TokenStream(cursor={self._cursor}, length={self._source_len}, "
            f"state={self._state.name})"
        )
