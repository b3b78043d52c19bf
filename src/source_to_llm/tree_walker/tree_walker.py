"""Depth-first directory walker.

This module provides the TreeWalker class, which visits a directory tree once in pre-order,
filters every entry through the whitelist and the ignore rules, and writes the surviving
entries into a TraversalOutput: one ASCII tree line per entry, plus the text of every
readable regular file.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional

from source_to_llm.exclusion_rules.ignore_ruleset import IgnoreRuleset, build_ignore_ruleset
from source_to_llm.exclusion_rules.whitelist_rules import WhitelistRules
from source_to_llm.types import FileType, FilterConfig, PathType

from .file_system_node import FileSystemNode
from .traversal_output import CONTENTS_HEADER_TEMPLATE, TraversalOutput

logger = logging.getLogger(__name__)

CONNECTOR = "├── "
LAST_CONNECTOR = "└── "
CONTINUATION_PREFIX = "│   "
LAST_PREFIX = "    "


def validate_root(root_dir: PathType) -> Path:
    """Resolve the traversal root and make sure it is a directory.

    Raises:
        FileNotFoundError: If the root path doesn't exist.
        NotADirectoryError: If the root path isn't a directory.
    """
    root_path = Path(root_dir).resolve()
    if not root_path.exists():
        raise FileNotFoundError(f"Directory not found: {root_path}")
    if not root_path.is_dir():
        raise NotADirectoryError(f'"{root_path}" is not a directory.')
    return root_path


def list_entries(directory: PathType) -> List[os.DirEntry]:
    """List a directory's immediate entries, ordered by name.

    Raises:
        OSError: If the directory cannot be listed.
    """
    with os.scandir(directory) as it:
        return sorted(it, key=lambda entry: entry.name)


def entry_type(entry: os.DirEntry) -> FileType:
    """Classify an entry without following symlinks."""
    try:
        if entry.is_symlink():
            return FileType.SYMLINK
        if entry.is_dir(follow_symlinks=False):
            return FileType.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return FileType.FILE
    except OSError:
        pass
    return FileType.OTHER


class TreeWalker:
    """Walks a directory tree and renders its structure and contents.

    The walker is configured once with the root, the ignore ruleset and the whitelist, and
    is then driven through walk(), which mutates a TraversalOutput in place. traverse() runs
    a complete walk from the root with a freshly seeded output.

    Entry handling per directory:
        - Entries are taken in listing order and never re-sorted afterwards.
        - The whitelist is applied first, then the ignore rules. Directories are tested with
          a trailing slash.
        - The last surviving entry gets the terminal connector, so an ignored trailing entry
          never leaves its predecessor drawn as a middle branch.
        - Directories are recursed into, regular files are read as UTF-8 text, and anything
          else (symlinks, sockets, ...) only gets its structure line.

    Error Handling:
        A directory that cannot be listed or a file that cannot be read is logged as a
        warning and skipped; a file that is not valid UTF-8 is treated as binary and skipped
        with an informational message. The walk itself never aborts.

    Attributes:
        root_path (Path): Absolute path of the traversal root.
        ruleset (IgnoreRuleset): Exclusion rules consulted for every entry.
        whitelist (WhitelistRules): Optional allow-list applied before the ignore rules.
        include_contents_header (bool): Whether headers are written into the contents.

    Example:
        >>> walker = TreeWalker("project", IgnoreRuleset())  # doctest: +SKIP
        >>> output = walker.traverse()  # doctest: +SKIP
        >>> print(output.structure, end="")  # doctest: +SKIP
        project
        ├── a.txt
        └── b
            └── c.txt
    """

    def __init__(
        self,
        root_path: PathType,
        ruleset: IgnoreRuleset,
        whitelist: Optional[WhitelistRules] = None,
        include_contents_header: bool = True,
    ) -> None:
        self.root_path = Path(root_path)
        self.ruleset = ruleset
        self.whitelist = whitelist if whitelist is not None else WhitelistRules()
        self.include_contents_header = include_contents_header

    def new_output(self) -> TraversalOutput:
        """Create an output seeded with the root name and the optional document header."""
        header = CONTENTS_HEADER_TEMPLATE.format(root_dir=self.root_path) if self.include_contents_header else ""
        return TraversalOutput(self.root_path.name, contents_header=header)

    def traverse(self) -> TraversalOutput:
        """Walk the whole tree from the root and return the finished output."""
        output = self.new_output()
        logger.info("Starting directory traversal...")
        self.walk(self.root_path, "", output)
        return output

    def relative_path(self, path: PathType) -> str:
        return Path(os.path.relpath(path, self.root_path)).as_posix()

    def is_included(self, relative_path: str, is_dir: bool) -> bool:
        """Apply the whitelist, then the ignore rules, to one entry."""
        if not self.whitelist.admits(relative_path, is_dir):
            return False
        return not self.ruleset.matches(relative_path, is_dir)

    def walk(
        self,
        current_dir: PathType,
        prefix: str,
        output: TraversalOutput,
        parent: Optional[FileSystemNode] = None,
    ) -> None:
        """Render one directory and, recursively, everything below it.

        Args:
            current_dir: The directory to list.
            prefix: Indentation inherited from the ancestors' connectors.
            output: The accumulator to append to.
            parent: Node of current_dir in the output tree. Defaults to the output's root.
        """
        try:
            entries = list_entries(current_dir)
        except OSError as e:
            logger.warning("Could not read directory %s: %s", current_dir, e)
            return

        survivors = list(self._filter(entries))

        for index, (entry, file_type, relative_path) in enumerate(survivors):
            is_last = index == len(survivors) - 1
            connector = LAST_CONNECTOR if is_last else CONNECTOR

            node = output.add_entry(connector, prefix, entry.name, file_type, relative_path, parent=parent)

            if file_type is FileType.DIRECTORY:
                child_prefix = prefix + (LAST_PREFIX if is_last else CONTINUATION_PREFIX)
                self.walk(entry.path, child_prefix, output, parent=node)
            elif file_type is FileType.FILE:
                self._read_file(entry.path, node, output)

    def _filter(self, entries: Iterable[os.DirEntry]) -> Iterable[tuple]:
        for entry in entries:
            file_type = entry_type(entry)
            relative_path = self.relative_path(entry.path)
            if self.is_included(relative_path, file_type is FileType.DIRECTORY):
                yield entry, file_type, relative_path

    def _read_file(self, path: PathType, node: FileSystemNode, output: TraversalOutput) -> None:
        try:
            # newline="" keeps line endings exactly as stored
            with open(path, "r", encoding="utf-8", newline="") as f:
                text = f.read()
        except UnicodeDecodeError:
            logger.info("Skipping likely binary file: %s", node.relative_path)
            node.is_binary = True
            return
        except OSError as e:
            logger.warning("Could not read file %s: %s", node.relative_path, e)
            return

        output.add_file_contents(node, text, self.include_contents_header)


def traverse_directory(
    root_dir: PathType,
    filter_config: Optional[FilterConfig] = None,
    include_contents_header: bool = True,
    reserved_names: Iterable[str] = (),
) -> TraversalOutput:
    """Validate the root, build the rules and run a complete traversal.

    Args:
        root_dir: Directory to process.
        filter_config: Gitignore toggle, extra ignore patterns and whitelist. Defaults to
            FilterConfig().
        include_contents_header: Whether to write the document and per-file headers.
        reserved_names: Additional names to ignore unconditionally, such as the configured
            output filenames.

    Returns:
        TraversalOutput: The finished structure and contents.

    Raises:
        FileNotFoundError: If the root path doesn't exist.
        NotADirectoryError: If the root path isn't a directory.

    Example:
        >>> output = traverse_directory("project")  # doctest: +SKIP
        >>> output.structure.splitlines()[0]  # doctest: +SKIP
        'project'
    """
    root_path = validate_root(root_dir)
    filter_config = filter_config if filter_config is not None else FilterConfig()

    ruleset = build_ignore_ruleset(
        root_path,
        use_gitignore=filter_config.use_gitignore,
        extra_patterns=filter_config.extra_ignore_patterns,
        reserved_names=reserved_names,
    )
    walker = TreeWalker(
        root_path,
        ruleset,
        whitelist=WhitelistRules(filter_config.only_patterns),
        include_contents_header=include_contents_header,
    )
    return walker.traverse()
