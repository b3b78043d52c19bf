"""Unit tests for composite exclusion rules."""

import pytest

from source_to_llm.exclusion_rules.base_rules import BaseExclusionRules
from source_to_llm.exclusion_rules.composite_rules import CompositeExclusionRules
from source_to_llm.exclusion_rules.git_rules import GitIgnoreExclusionRules


class MockExclusionRules(BaseExclusionRules):
    """Mock exclusion rules for testing."""

    def __init__(self, exclude_patterns=None, has_rules_result=True):
        self.exclude_patterns = exclude_patterns or []
        self.has_rules_result = has_rules_result
        self.calls = []

    def exclude(self, path: str) -> bool:
        self.calls.append(path)
        return path in self.exclude_patterns

    def has_rules(self) -> bool:
        return self.has_rules_result


class TestCompositeExclusionRules:
    """Test the CompositeExclusionRules class."""

    def test_requires_rules(self):
        with pytest.raises(ValueError, match="At least one exclusion rule"):
            CompositeExclusionRules([])

    def test_rejects_non_rules(self):
        with pytest.raises(TypeError, match="Rule at index 1"):
            CompositeExclusionRules([MockExclusionRules(), "*.log"])

    def test_excludes_if_any_rule_excludes(self):
        composite = CompositeExclusionRules([MockExclusionRules(["a"]), MockExclusionRules(["b"])])
        assert composite.exclude("a")
        assert composite.exclude("b")
        assert not composite.exclude("c")

    def test_short_circuits(self):
        first = MockExclusionRules(["a"])
        second = MockExclusionRules()
        CompositeExclusionRules([first, second]).exclude("a")
        assert second.calls == []

    def test_has_rules(self):
        assert not CompositeExclusionRules([MockExclusionRules(has_rules_result=False)]).has_rules()
        assert CompositeExclusionRules(
            [MockExclusionRules(has_rules_result=False), MockExclusionRules(has_rules_result=True)]
        ).has_rules()

    def test_get_rules_returns_copy(self):
        rule = MockExclusionRules()
        composite = CompositeExclusionRules([rule])
        composite.get_rules().clear()
        assert composite.get_rules() == [rule]

    def test_negation_does_not_cross_rule_sets(self):
        builtin = GitIgnoreExclusionRules()
        builtin.add_rule("node_modules")
        user = GitIgnoreExclusionRules()
        user.add_rule("!node_modules")
        assert CompositeExclusionRules([builtin, user]).exclude("node_modules/")


def test_base_rules_optional_capabilities():
    rule = MockExclusionRules()
    with pytest.raises(NotImplementedError):
        rule.load_rules("rules.ignore")
    with pytest.raises(NotImplementedError):
        rule.add_rule("*.log")
