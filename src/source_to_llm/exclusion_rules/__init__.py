"""Exclusion and whitelist rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .git_rules import GitIgnoreExclusionRules
from .ignore_ruleset import ALWAYS_IGNORE, IgnoreRuleset, build_ignore_ruleset
from .whitelist_rules import WhitelistRules

__all__ = [
    "ALWAYS_IGNORE",
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "GitIgnoreExclusionRules",
    "IgnoreRuleset",
    "WhitelistRules",
    "build_ignore_ruleset",
]
