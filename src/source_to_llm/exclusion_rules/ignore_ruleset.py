"""Combined ignore rules consulted by the tree walker for every entry."""

import logging
from pathlib import Path
from typing import Iterable, Sequence

from source_to_llm.types import PathType

from .composite_rules import CompositeExclusionRules
from .git_rules import GitIgnoreExclusionRules

logger = logging.getLogger(__name__)

DEFAULT_STRUCTURE_FILENAME = "structure.txt"
DEFAULT_CONTENTS_FILENAME = "contents.txt"
GITIGNORE_FILENAME = ".gitignore"

# Never part of the output, whatever the user rules say
ALWAYS_IGNORE = (".git", "node_modules", DEFAULT_STRUCTURE_FILENAME, DEFAULT_CONTENTS_FILENAME)


class IgnoreRuleset(CompositeExclusionRules):
    """Read-only ruleset combining the built-in ignores with the user's gitignore rules.

    The built-in names live in their own rule set, so they are excluded unconditionally:
    a ``!node_modules`` line in .gitignore or in the extra patterns cannot bring them back.
    Everything else follows .gitignore semantics, with the extra patterns evaluated after
    the .gitignore lines.

    Attributes:
        builtin_rules (GitIgnoreExclusionRules): The always-ignored names.
        user_rules (GitIgnoreExclusionRules): .gitignore lines followed by extra patterns.

    Example:
        >>> ruleset = IgnoreRuleset(["*.log", "dist/"])
        >>> ruleset.matches("nested/app.log", is_dir=False)
        True
        >>> ruleset.matches("dist", is_dir=True)
        True
        >>> ruleset.matches("dist", is_dir=False)
        False
        >>> ruleset.matches(".git", is_dir=True)
        True
    """

    def __init__(self, user_patterns: Iterable[str] = (), reserved_names: Iterable[str] = ()):
        self.builtin_rules = GitIgnoreExclusionRules()
        self.builtin_rules.add_rules(_unique([*ALWAYS_IGNORE, *reserved_names]))
        self.user_rules = GitIgnoreExclusionRules()
        self.user_rules.add_rules(user_patterns)
        super().__init__([self.builtin_rules, self.user_rules])

    def matches(self, relative_path: str, is_dir: bool) -> bool:
        """Check whether an entry is excluded.

        Args:
            relative_path: Path relative to the traversal root, using forward slashes.
            is_dir: Whether the entry is a directory. Directories are tested with a
                trailing slash so that directory-only patterns such as ``dist/`` apply.

        Returns:
            bool: True if the entry must be left out of the output.
        """
        check_path = relative_path.rstrip("/")
        if is_dir:
            check_path += "/"
        return self.exclude(check_path)


def build_ignore_ruleset(
    root_dir: PathType,
    use_gitignore: bool = True,
    extra_patterns: Sequence[str] = (),
    reserved_names: Iterable[str] = (),
) -> IgnoreRuleset:
    """Build the ruleset for one traversal.

    Args:
        root_dir: The traversal root. Its .gitignore, if any, is read from here.
        use_gitignore: Whether to merge the root's .gitignore rules.
        extra_patterns: Additional gitignore-style exclusions, appended last.
        reserved_names: Extra names to ignore unconditionally, typically the configured
            output filenames.

    Returns:
        IgnoreRuleset: The combined ruleset.

    Note:
        A missing .gitignore is not an error. A .gitignore that exists but cannot be read
        is reported as a warning and skipped.
    """
    user_rules = GitIgnoreExclusionRules()

    if use_gitignore:
        gitignore_path = Path(root_dir) / GITIGNORE_FILENAME
        try:
            user_rules.load_rules(gitignore_path)
            logger.info("Loaded rules from %s", gitignore_path)
        except FileNotFoundError:
            logger.info(".gitignore not found, using default ignore rules.")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read .gitignore: %s", e)
    else:
        logger.info(".gitignore processing skipped as per configuration.")

    return IgnoreRuleset([*user_rules.lines, *extra_patterns], reserved_names=reserved_names)


def _unique(names: Iterable[str]) -> list:
    return list(dict.fromkeys(names))
