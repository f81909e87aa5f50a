"""LexerBuilder: accumulate rules, then compile them into a Lexer.

Rules are kept in declaration order; that order becomes each rule's
priority, which breaks ties between equally long matches.

Thread Safety:
LexerBuilder is mutable and not thread-safe. The Lexer it builds is
immutable and safe to share.

Example:
    >>> lexer = (
    ...     LexerBuilder()
    ...     .token(r"[0-9]+", lambda text: ("NUM", int(text)))
    ...     .token(r"\\+", lambda _: "PLUS")
    ...     .skip(r"\\s+")
    ...     .build()
    ... )
    >>> list(lexer.tokens("1 + 2"))
    [('NUM', 1), 'PLUS', ('NUM', 2)]
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import TYPE_CHECKING

from patlex.config import get_lexer_config
from patlex.errors import InvalidPatternError, PatternErrors
from patlex.patterns import PatternSet
from patlex.rules import compile_rule
from patlex.utils.logger import get_logger

if TYPE_CHECKING:
    from patlex.config import LexerConfig
    from patlex.lexer import Lexer
    from patlex.rules import Action, Rule

logger = get_logger(__name__)


def _skip(_text: str) -> None:
    return None


class LexerBuilder[K]:
    """Mutable builder for Lexer.

    Use token() and skip() to declare rules, then call build() to compile
    them into an immutable Lexer. Pattern sources are not compiled until
    build(), which is where invalid patterns are reported.
    """

    __slots__ = ("_sources", "_actions", "_config")

    def __init__(self, config: LexerConfig | None = None) -> None:
        """Initialize empty builder.

        Args:
            config: Build configuration. If None, the context's config
                (see patlex.config) is read when build() runs.
        """
        self._sources: list[str] = []
        self._actions: list[Action[K]] = []
        self._config = config

    def token(self, pattern: str, action: Action[K]) -> LexerBuilder[K]:
        """Declare a rule.

        When ``pattern`` gives the longest match at the cursor, ``action``
        is called with the matched text:

        * If it returns a value, that value becomes the token's kind.
        * If it returns None, the text is consumed and no token is emitted.

        If several rules produce the same longest match, the one declared
        first wins.

        Args:
            pattern: Regular expression source (``re`` syntax)
            action: Callable from matched text to token kind or None

        Returns:
            Self for chaining
        """
        if not callable(action):
            msg = f"Action for pattern {pattern!r} is not callable"
            raise TypeError(msg)
        self._sources.append(pattern)
        self._actions.append(action)
        return self

    def skip(self, pattern: str) -> LexerBuilder[K]:
        """Declare a rule whose matches are always consumed silently."""
        return self.token(pattern, _skip)

    def tokens(self, rules: Iterable[tuple[str, Action[K]]]) -> LexerBuilder[K]:
        """Declare several rules in order.

        Args:
            rules: (pattern, action) pairs

        Returns:
            Self for chaining
        """
        for pattern, action in rules:
            self.token(pattern, action)
        return self

    def build(self) -> Lexer[K]:
        """Compile the declared rules into a Lexer.

        Returns:
            Immutable Lexer

        Raises:
            InvalidPatternError: If a pattern fails to compile, or matches
                the empty string while reject_empty_matches is set
            PatternErrors: If collect_errors is set and any pattern is invalid
        """
        from patlex.lexer import Lexer

        config = self._config if self._config is not None else get_lexer_config()

        rules: list[Rule[K]] = []
        errors: list[InvalidPatternError] = []
        for index, (source, action) in enumerate(zip(self._sources, self._actions)):
            try:
                rule = self._compile(index, source, action, config)
            except InvalidPatternError as err:
                if not config.collect_errors:
                    logger.debug("Lexer build failed: %s", err)
                    raise
                errors.append(err)
                continue
            rules.append(rule)

        if errors:
            logger.debug("Lexer build failed with %d invalid pattern(s)", len(errors))
            raise PatternErrors(tuple(errors))

        logger.debug("Built lexer with %d rule(s)", len(rules))
        return Lexer(PatternSet(tuple(rules)), config)

    @staticmethod
    def _compile(index: int, source: str, action: Action[K], config: LexerConfig) -> Rule[K]:
        try:
            rule = compile_rule(index, source, action, config.flags)
        except re.error as err:
            raise InvalidPatternError(index, source, err) from err

        if config.reject_empty_matches and rule.pattern.fullmatch("") is not None:
            cause = ValueError("pattern matches the empty string")
            raise InvalidPatternError(index, source, cause)
        return rule

    def __len__(self) -> int:
        """Number of declared rules."""
        return len(self._sources)

    def __repr__(self) -> str:
        return f"LexerBuilder(patterns={self._sources!r})"
