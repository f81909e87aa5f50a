"""Spans and source locations.

Span is the half-open range a token occupies in the scanned source.
SourceLocation is its human-facing counterpart (1-indexed line and column),
computed on demand by locate() since most callers never need it.

Offsets index the source ``str`` directly (code points, not UTF-8 bytes).

Thread Safety:
Span and SourceLocation are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open range ``[start, end)`` into a source string.

    Attributes:
        start: Offset of the first character
        end: Offset one past the last character

    Examples:
        >>> span = Span(3, 5)
        >>> span.slice("12 ab")
        'ab'
        >>> len(span)
        2
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            msg = f"Invalid span [{self.start}, {self.end})"
            raise ValueError(msg)

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"

    def slice(self, source: str) -> str:
        """Return the text this span covers in source."""
        return source[self.start : self.end]

    text = slice

    def location(self, source: str) -> SourceLocation:
        """Get the start and end location of this span in source.

        Args:
            source: The source string the span was produced from

        Returns:
            SourceLocation with start and end offsets filled in
        """
        start = locate(source, self.start)
        end = locate(source, self.end)
        return SourceLocation(
            lineno=start.lineno,
            col_offset=start.col_offset,
            offset=self.start,
            end_offset=self.end,
            end_lineno=end.lineno,
            end_col_offset=end.col_offset,
        )


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    All line/column positions are 1-indexed.

    Attributes:
        lineno: Starting line number
        col_offset: Starting column
        offset: Absolute start offset in the source
        end_offset: Absolute end offset (equal to offset for a point)
        end_lineno: Ending line number (optional)
        end_col_offset: Ending column (optional)

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None

    def __str__(self) -> str:
        """Format location as ``line:col``."""
        return f"{self.lineno}:{self.col_offset}"


def locate(source: str, offset: int) -> SourceLocation:
    """Compute the line and column of an offset in source.

    Args:
        source: Source text
        offset: Offset into source, 0 <= offset <= len(source)

    Returns:
        Point SourceLocation (offset == end_offset)

    Raises:
        ValueError: If offset is outside the source

    Complexity: O(offset)
    """
    if offset < 0 or offset > len(source):
        msg = f"Offset {offset} outside source of length {len(source)}"
        raise ValueError(msg)

    lineno = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return SourceLocation(
        lineno=lineno,
        col_offset=offset - line_start + 1,
        offset=offset,
        end_offset=offset,
    )
