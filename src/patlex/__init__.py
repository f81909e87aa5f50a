"""
patlex: rule-based lexer for Python

Declare an ordered list of regular-expression rules, each with an action
that turns the matched text into a token kind (or None to skip it). At every
position the longest match wins; among equally long matches the rule
declared first wins.

Quick Start:
    >>> from patlex import LexerBuilder
    >>> lexer = (
    ...     LexerBuilder()
    ...     .token(r"[0-9]+", lambda text: ("NUM", int(text)))
    ...     .token(r"\\+", lambda _: "ADD")
    ...     .token(r"\\*", lambda _: "MUL")
    ...     .token(r"\\(", lambda _: "OPEN")
    ...     .token(r"\\)", lambda _: "CLOSE")
    ...     .skip(r"\\s+")
    ...     .build()
    ... )
    >>> list(lexer.tokens("(1 + 2) * 3"))
    ['OPEN', ('NUM', 1), 'ADD', ('NUM', 2), 'CLOSE', 'MUL', ('NUM', 3)]

    >>> # Spans are available through scan()
    >>> for token in lexer.scan("1 + 2"):
    ...     print(token.kind, token.span)
    ('NUM', 1) [0, 1)
    ADD [2, 3)
    ('NUM', 2) [4, 5)

Installation:
    pip install patlex              # zero runtime dependencies
"""

from patlex.builder import LexerBuilder
from patlex.config import (
    LexerConfig,
    get_lexer_config,
    lexer_config_context,
    reset_lexer_config,
    set_lexer_config,
)
from patlex.errors import (
    BuildError,
    InvalidPatternError,
    LexError,
    NoMatchingRuleError,
    PatlexError,
    PatternErrors,
    ZeroWidthMatchError,
)
from patlex.lexer import Lexer
from patlex.location import SourceLocation, Span, locate
from patlex.patterns import Match, PatternSet
from patlex.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from patlex.rules import Action, Rule
from patlex.stream import StreamState, TokenStream
from patlex.tokens import Token

__version__ = "0.1.0"


def tokenize[K](source: str, rules: list[tuple[str, Action[K]]]) -> list[Token[K]]:
    """Build a one-off lexer from rules and tokenize source with it.

    Prefer building a Lexer once when tokenizing many sources.

    Args:
        source: Text to tokenize
        rules: (pattern, action) pairs in priority order

    Returns:
        All tokens in source

    Raises:
        BuildError: If a pattern is invalid
        LexError: If source cannot be tokenized
    """
    return LexerBuilder().tokens(rules).build().tokenize(source)


__all__ = [  # noqa: RUF022 (grouped by category)
    # Build
    "LexerBuilder",
    "Lexer",
    "tokenize",
    # Scan
    "TokenStream",
    "StreamState",
    "Token",
    "Span",
    "SourceLocation",
    "locate",
    # Rules
    "Action",
    "Rule",
    "PatternSet",
    "Match",
    # Config
    "LexerConfig",
    "get_lexer_config",
    "set_lexer_config",
    "reset_lexer_config",
    "lexer_config_context",
    # Profiling
    "ScanAccumulator",
    "get_scan_accumulator",
    "profiled_scan",
    # Errors
    "PatlexError",
    "BuildError",
    "InvalidPatternError",
    "PatternErrors",
    "LexError",
    "NoMatchingRuleError",
    "ZeroWidthMatchError",
    # Version
    "__version__",
]
