from dataclasses import dataclass
from enum import Enum
from os import PathLike
from typing import Tuple, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileType(Enum):
    """Enumeration of entry types for categorizing items during traversal.

    Only directories and regular files receive further handling after their tree line
    is emitted. Symlinks and everything else (sockets, FIFOs, devices) are shown in the
    structure but never descended into or read.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
        SYMLINK: Symbolic link
        OTHER: Socket, FIFO, device or anything else
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"


@dataclass(frozen=True)
class FilterConfig:
    """Filtering options supplied once at the start of a traversal.

    Attributes:
        use_gitignore: Whether to merge the rules of the root's .gitignore file.
        extra_ignore_patterns: Additional gitignore-style exclusion patterns, applied after
            the .gitignore rules.
        only_patterns: Whitelist of gitignore-style patterns. Empty means no restriction.

    Example:
        >>> config = FilterConfig(extra_ignore_patterns=("*.log",))
        >>> config.use_gitignore
        True
        >>> config.only_patterns
        ()
    """

    use_gitignore: bool = True
    extra_ignore_patterns: Tuple[str, ...] = ()
    only_patterns: Tuple[str, ...] = ()
