"""Token definition for patlex.

A Token pairs a caller-defined kind with the Span the winning rule matched.
Kinds are whatever the rule actions return: an Enum member, a string, a
tuple carrying a parsed value, and so on. Every rule in one Lexer shares a
single kind type ``K``.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from patlex.location import Span

if TYPE_CHECKING:
    from patlex.location import SourceLocation


@dataclass(frozen=True, slots=True)
class Token[K]:
    """A token produced by a TokenStream.

    Attributes:
        kind: Value returned by the winning rule's action
        span: Exact range of source the rule matched

    Tokens do not keep a reference to the source; pass it to text() or
    location() when the matched text or a line/column is needed.

    """

    kind: K
    span: Span

    @property
    def start(self) -> int:
        """Start offset (convenience accessor)."""
        return self.span.start

    @property
    def end(self) -> int:
        """End offset (convenience accessor)."""
        return self.span.end

    def text(self, source: str) -> str:
        """Return the matched text."""
        return self.span.slice(source)

    def location(self, source: str) -> SourceLocation:
        """Return the line/column location of this token in source."""
        return self.span.location(source)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        return f"Token({self.kind!r}, {self.span})"
