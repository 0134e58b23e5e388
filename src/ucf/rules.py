"""Precedence-ordered rule collection.

Rules are kept sorted by descending precedence. Python's sort is stable, so
rules with equal precedence stay in registration order: sorting the
already-ordered list after an append places the new rule after its peers.

Thread Safety:
RuleSet is mutable and has no internal locking. Serialize mutation against
tokenization when sharing a lexer between threads.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ucf.tokens import TokenRule


def _precedence_key(rule: TokenRule) -> int:
    return -rule.precedence


class RuleSet:
    """Ordered collection of token rules.

    Example:
        >>> rules = RuleSet([TokenRule("ID", re.compile(r"[a-z]+"))])
        >>> rules.add(TokenRule("KW", "let", precedence=10))
        >>> [r.type for r in rules]
        ['KW', 'ID']

    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Iterable[TokenRule] = ()) -> None:
        self._rules: list[TokenRule] = sorted(rules, key=_precedence_key)

    def add(self, rule: TokenRule) -> None:
        """Append a rule and restore precedence order."""
        self._rules.append(rule)
        self._rules.sort(key=_precedence_key)

    def remove_type(self, rule_type: str) -> int:
        """Remove every rule with the given type.

        Args:
            rule_type: Token type tag

        Returns:
            Number of rules removed
        """
        before = len(self._rules)
        self._rules = [rule for rule in self._rules if rule.type != rule_type]
        return before - len(self._rules)

    def snapshot(self) -> list[TokenRule]:
        """Independent copy of the rules in match order."""
        return list(self._rules)

    def type_counts(self) -> dict[str, int]:
        """Number of registered rules per token type, in first-seen order."""
        counts: dict[str, int] = {}
        for rule in self._rules:
            counts[rule.type] = counts.get(rule.type, 0) + 1
        return counts

    def __iter__(self) -> Iterator[TokenRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __bool__(self) -> bool:
        return bool(self._rules)

    def __repr__(self) -> str:
        types = ", ".join(rule.type for rule in self._rules)
        return f"RuleSet([{types}])"
