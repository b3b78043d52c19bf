"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule sets.

    A path is excluded if ANY of the constituent rules determines it should be excluded.
    Because the constituents are evaluated independently, a negation pattern in one rule
    set can never re-include a path that another rule set excludes.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from source_to_llm.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> builtin = GitIgnoreExclusionRules()
        >>> builtin.add_rule(".git")
        >>> user = GitIgnoreExclusionRules()
        >>> user.add_rule("!.git")
        >>> CompositeExclusionRules([builtin, user]).exclude(".git/")
        True
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine.

        Raises:
            ValueError: If rules list is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, " f"got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        """Check if a path should be excluded by any constituent rule.

        Uses short-circuit evaluation: stops checking as soon as any rule
        returns True for exclusion.
        """
        return any(rule.exclude(path) for rule in self.rules)

    def has_rules(self) -> bool:
        """Check if any constituent rule has rules configured."""
        return any(rule.has_rules() for rule in self.rules)

    def get_rules(self) -> List[BaseExclusionRules]:
        """Get a copy of the constituent rules list."""
        return list(self.rules)
