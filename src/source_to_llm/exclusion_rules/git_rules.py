"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from pathspec import GitIgnoreSpec

from source_to_llm.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    This class implements the BaseExclusionRules interface using standard .gitignore pattern
    matching rules. It uses the pathspec library to match file paths against patterns in
    the same way that Git does.

    The rules support all standard .gitignore syntax including:
    - Basic globs (*, ?, [abc], [0-9], etc.)
    - Directory-specific patterns (ending in /)
    - Root-anchored patterns (starting with /)
    - Negation patterns (starting with !)
    - Double-asterisk matching (**)
    - Comment lines (starting with #)

    Rules from files and individually added rules are kept in one ordered list, with later
    rules overriding earlier ones (particularly for negation patterns with !).

    Attributes:
        spec (GitIgnoreSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rules(["dist/", "*.log", "!keep.log"])
        >>> rules.exclude("dist/")
        True
        >>> rules.exclude("nested/app.log")
        True
        >>> rules.exclude("keep.log")
        False

    Note:
        The paths provided to exclude() should use forward slashes (/) as path separators,
        even on Windows systems, to match Git's behavior.
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize GitIgnoreExclusionRules with patterns from specified files.

        Args:
            rules_files: Path(s) to the file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = GitIgnoreSpec.from_lines(self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    @property
    def lines(self) -> List[str]:
        """Copy of the raw pattern lines in the order they were added."""
        return list(self._lines)

    def exclude(self, path: str) -> bool:
        """Check if a path should be excluded based on the loaded .gitignore patterns.

        The path is matched exactly as provided - no path normalization is performed, so
        directories must be passed with their trailing slash for directory-only patterns
        such as ``build/`` to apply to them.

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("build/")
            >>> rules.exclude("build/")
            True
            >>> rules.exclude("build")
            False
        """
        return bool(self.spec.match_file(path))

    def has_rules(self) -> bool:
        return bool(self.spec.patterns)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine .gitignore patterns from one or more files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
            OSError: If a rules file exists but cannot be read.
            UnicodeDecodeError: If a rules file is not valid UTF-8.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r", encoding="utf-8") as f:
                self.add_rules(f.read().splitlines())

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern directly.

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("*.pyc")
            >>> rules.add_rule("!important.pyc")
            >>> rules.exclude("important.pyc")
            False
        """
        self.add_rules([rule])

    def add_rules(self, rules: Iterable[str]) -> None:
        """Append several .gitignore patterns, preserving their order."""
        self._lines.extend(rules)
        self.spec = GitIgnoreSpec.from_lines(self._lines)
