"""Lexical rules: a compiled pattern, its priority, and its action.

Thread Safety:
Rule is frozen. The action it holds may carry private state (a closure
counting matches, a symbol table being filled in); a TokenStream calls it
at most once per accepted match and never concurrently, but two streams
over the same Lexer share the same action object.

"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field

# Receives the matched text; returns a token kind, or None to skip the text
type Action[K] = Callable[[str], K | None]


@dataclass(frozen=True, slots=True)
class Rule[K]:
    """A single lexical rule.

    Attributes:
        pattern: Compiled regular expression, matched anchored at the cursor
        priority: Declaration index; lower wins ties on match length
        action: Callable producing the token kind for a match, or None to skip
        source: Pattern source as declared, for diagnostics

    """

    pattern: re.Pattern[str]
    priority: int
    action: Action[K] = field(repr=False, compare=False)
    source: str = ""

    def match_end(self, text: str, offset: int) -> int | None:
        """Return the end of this rule's match at offset, or None.

        The pattern runs against the whole text with ``pos=offset`` so that
        lookbehind and ``\\b`` still see the preceding characters, while
        ``re.Pattern.match`` keeps the match anchored at offset.
        """
        m = self.pattern.match(text, offset)
        if m is None:
            return None
        return m.end()


def compile_rule[K](index: int, source: str, action: Action[K], flags: int = 0) -> Rule[K]:
    """Compile a pattern source into a Rule.

    Args:
        index: Declaration index (becomes the priority)
        source: Regular expression source
        action: Token-producing callable
        flags: ``re`` flags applied to the pattern

    Returns:
        Compiled Rule

    Raises:
        re.error: If source is not a valid regular expression
    """
    return Rule(
        pattern=re.compile(source, flags),
        priority=index,
        action=action,
        source=source,
    )
