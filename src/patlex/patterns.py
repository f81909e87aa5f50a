"""PatternSet: the ordered collection of rules queried at each scan step.

Matching policy is "longest match, first declared wins ties":

1. Every rule's pattern is tried anchored at the offset.
2. Among the rules that match, the greatest end offset wins.
3. When several rules reach the same end, the lowest priority
   (earliest declaration) wins.

So a keyword rule declared before a general identifier rule wins on "if",
but the identifier rule still wins on "iffy" because its match is longer.

Complexity: O(rules) pattern evaluations per step. The rules are not merged
into a single automaton, so arbitrary ``re`` features (lookaround,
backreferences) stay available to each pattern.

Thread Safety:
PatternSet is immutable after creation. Safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from patlex.rules import Rule


@dataclass(frozen=True, slots=True)
class Match:
    """Winning rule at a scan position.

    Attributes:
        rule_index: Priority (declaration index) of the winning rule
        end: End offset of its match
    """

    rule_index: int
    end: int


class PatternSet[K]:
    """Immutable, ordered set of compiled rules.

    Use LexerBuilder to create instances.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: tuple[Rule[K], ...]) -> None:
        """Initialize with rules in declaration order.

        Raises:
            ValueError: If a rule's priority does not equal its position
        """
        for index, rule in enumerate(rules):
            if rule.priority != index:
                msg = f"Rule at position {index} has priority {rule.priority}"
                raise ValueError(msg)
        self._rules = rules

    def best_match(self, source: str, offset: int) -> Match | None:
        """Find the rule that wins at offset.

        Args:
            source: Full source text
            offset: Cursor position, 0 <= offset <= len(source)

        Returns:
            Match for the longest match (earliest rule on ties), or None if
            no rule matches at offset
        """
        best_index = -1
        best_end = -1
        for rule in self._rules:
            end = rule.match_end(source, offset)
            # Strict comparison keeps the earlier rule on equal length
            if end is not None and end > best_end:
                best_index = rule.priority
                best_end = end

        if best_index < 0:
            return None
        return Match(rule_index=best_index, end=best_end)

    @property
    def rules(self) -> tuple[Rule[K], ...]:
        """All rules in declaration order."""
        return self._rules

    @property
    def sources(self) -> tuple[str, ...]:
        """Pattern sources in declaration order."""
        return tuple(rule.source for rule in self._rules)

    def __getitem__(self, index: int) -> Rule[K]:
        return self._rules[index]

    def __iter__(self) -> Iterator[Rule[K]]:
        return iter(self._rules)

    def __len__(self) -> int:
        """Number of rules."""
        return len(self._rules)

    def __repr__(self) -> str:
        return f"PatternSet({list(self.sources)!r})"
