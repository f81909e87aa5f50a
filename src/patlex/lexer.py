"""Lexer: an immutable, reusable tokenizer built by LexerBuilder.

Thread Safety:
Lexer holds only the compiled PatternSet and its LexerConfig. It performs
no mutation while scanning, so one Lexer may serve any number of
concurrent scans; each scan gets its own TokenStream.

"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from patlex.stream import TokenStream

if TYPE_CHECKING:
    from patlex.builder import LexerBuilder
    from patlex.config import LexerConfig
    from patlex.patterns import PatternSet
    from patlex.tokens import Token


class Lexer[K]:
    """A rule-based lexer.

    Usage:
            >>> lexer = (
            ...     Lexer.builder()
            ...     .token(r"[0-9]+", lambda _: "A")
            ...     .token(r"[a-z]+", lambda _: "B")
            ...     .skip(r"\\s+")
            ...     .build()
            ... )
            >>> lexer.tokenize("12 ab")
        [Token('A', [0, 2)), Token('B', [3, 5))]

    """

    __slots__ = ("_patterns", "_config")

    def __init__(self, patterns: PatternSet[K], config: LexerConfig) -> None:
        """Initialize with compiled rules.

        Use LexerBuilder (or Lexer.builder()) to create instances.
        """
        self._patterns = patterns
        self._config = config

    @staticmethod
    def builder(config: LexerConfig | None = None) -> LexerBuilder[K]:
        """Create a LexerBuilder. Same as ``LexerBuilder(config)``."""
        from patlex.builder import LexerBuilder

        return LexerBuilder(config)

    @property
    def patterns(self) -> PatternSet[K]:
        return self._patterns

    @property
    def config(self) -> LexerConfig:
        """Configuration the rules were compiled with."""
        return self._config

    def scan(self, source: str) -> TokenStream[K]:
        """Start a new scan of source.

        Args:
            source: Text to tokenize

        Returns:
            Fresh TokenStream positioned at offset 0
        """
        return TokenStream(source, self._patterns)

    def tokens(self, source: str) -> Iterator[K]:
        """Iterate over token kinds only, dropping spans.

        Raises:
            LexError: On the first position no rule can handle
        """
        for token in self.scan(source):
            yield token.kind

    def tokenize(self, source: str) -> list[Token[K]]:
        """Scan source to the end and return all tokens.

        Raises:
            LexError: On the first position no rule can handle
        """
        return list(self.scan(source))

    def __repr__(self) -> str:
        return f"Lexer(patterns={list(self._patterns.sources)!r})"
