"""Whitelist ("only") rules restricting a traversal to matching paths."""

from fnmatch import fnmatchcase
from typing import List, Sequence

from pathspec import GitIgnoreSpec


class WhitelistRules:
    """Allow-list of gitignore-style patterns.

    Whitelist patterns use exactly the same dialect as the ignore rules: ``*`` stays within a
    path segment, ``**`` crosses segments, a pattern containing a slash is anchored to the
    root and a pattern without one matches at any depth.

    A file is admitted when the patterns match its relative path. A directory is admitted
    when the patterns match it, or when some pattern could still match something below it;
    otherwise the walk could never reach whitelisted files such as ``src/nested/b.txt``.
    An empty whitelist admits everything.

    Example:
        >>> only = WhitelistRules(["src/**"])
        >>> only.admits("src/a.txt", is_dir=False)
        True
        >>> only.admits("src/nested/b.txt", is_dir=False)
        True
        >>> only.admits("lib/c.txt", is_dir=False)
        False
        >>> only.admits("lib", is_dir=True)
        False
        >>> WhitelistRules().admits("anything", is_dir=False)
        True
    """

    def __init__(self, patterns: Sequence[str] = ()):
        self.patterns = tuple(patterns)
        self.spec = GitIgnoreSpec.from_lines(self.patterns)
        self._segment_patterns: List[List[str]] = []
        self._floating = False

        for pattern in self.patterns:
            pattern = pattern.strip()
            if not pattern or pattern.startswith(("#", "!")):
                continue
            body = pattern.rstrip("/")
            if "/" not in body:
                # Unanchored, may match at any depth
                self._floating = True
            else:
                self._segment_patterns.append(body.lstrip("/").split("/"))

    def __bool__(self) -> bool:
        return bool(self.patterns)

    def admits(self, relative_path: str, is_dir: bool) -> bool:
        """Check whether an entry passes the whitelist.

        Args:
            relative_path: Path relative to the traversal root, using forward slashes.
            is_dir: Whether the entry is a directory.

        Returns:
            bool: True if the entry passes, always True for an empty whitelist.
        """
        if not self.patterns:
            return True

        relative_path = relative_path.rstrip("/")
        if not is_dir:
            return bool(self.spec.match_file(relative_path))

        if self.spec.match_file(relative_path + "/"):
            return True
        return self._could_match_below(relative_path.split("/"))

    def _could_match_below(self, dir_parts: List[str]) -> bool:
        if self._floating:
            return True
        return any(_leading_segments_match(segments, dir_parts) for segments in self._segment_patterns)


def _leading_segments_match(pattern_segments: List[str], dir_parts: List[str]) -> bool:
    for index, part in enumerate(dir_parts):
        if index >= len(pattern_segments):
            return True
        segment = pattern_segments[index]
        if segment == "**":
            return True
        if not fnmatchcase(part, segment):
            return False
    return True
