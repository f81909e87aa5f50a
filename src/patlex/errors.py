"""Exception classes for patlex.

Build-time failures derive from BuildError, scan-time failures from
LexError. Both share the PatlexError root so callers can catch everything
the library raises with a single except clause.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from patlex.location import SourceLocation


class PatlexError(Exception):
    """Base exception for all patlex errors."""

    pass


# =========================================================================
# Build-time errors
# =========================================================================


class BuildError(PatlexError):
    """A LexerBuilder could not produce a Lexer.

    Raised by LexerBuilder.build(). The builder itself stays usable; fix the
    offending rule and build again.
    """

    pass


class InvalidPatternError(BuildError):
    """A rule's pattern source failed to compile or was rejected.

    Attributes:
        index: Declaration index of the rule (0-based)
        source: The pattern source as given to LexerBuilder.token()
        cause: The underlying exception (re.error, or ValueError for
            patterns rejected because they match the empty string)
    """

    def __init__(self, index: int, source: str, cause: Exception) -> None:
        self.index = index
        self.source = source
        self.cause = cause
        super().__init__(f"Rule {index} has invalid pattern {source!r}: {cause}")


class PatternErrors(BuildError):
    """Several rules failed to compile.

    Only raised when LexerConfig.collect_errors is enabled; otherwise the
    first InvalidPatternError is raised on its own.
    """

    def __init__(self, errors: tuple[InvalidPatternError, ...]) -> None:
        self.errors = errors
        indices = ", ".join(str(err.index) for err in errors)
        super().__init__(f"{len(errors)} invalid pattern(s) in rules {indices}")


# =========================================================================
# Scan-time errors
# =========================================================================


class LexError(PatlexError):
    """Error while scanning a source string.

    Terminal for the TokenStream that raised it. Tokens produced before the
    error remain valid.
    """

    def __init__(self, message: str, offset: int, source: str | None = None) -> None:
        """Initialize with the failing offset.

        Args:
            message: Error description
            offset: Cursor position at which scanning failed
            source: The scanned source, used for line/column reporting
        """
        self.message = message
        self.offset = offset
        self.source = source

        location = ""
        if source is not None:
            location = f"{self.location} "
        super().__init__(f"{location}{message}")

    @property
    def location(self) -> SourceLocation | None:
        """Line/column of the failure, or None if the source is unknown."""
        if self.source is None:
            return None

        from patlex.location import locate

        return locate(self.source, self.offset)


class NoMatchingRuleError(LexError):
    """No rule matched at the cursor."""

    def __init__(self, offset: int, source: str | None = None) -> None:
        message = f"No rule matches at offset {offset}"
        if source is not None:
            snippet = source[offset : offset + 20]
            message += f": {snippet!r}"
        super().__init__(message, offset, source)


class ZeroWidthMatchError(LexError):
    """The winning rule matched the empty string.

    Advancing by zero would stall the cursor forever, so the stream stops
    instead.
    """

    def __init__(self, rule_index: int, offset: int, source: str | None = None) -> None:
        self.rule_index = rule_index
        super().__init__(
            f"Rule {rule_index} matched the empty string at offset {offset}",
            offset,
            source,
        )
