"""Directory traversal producing the structure and contents documents.

This package contains the depth-first walker that filters every entry through the
whitelist and the ignore rules, and the accumulator that collects its output.
"""

from .file_system_node import FileSystemNode
from .traversal_output import TraversalOutput
from .tree_walker import TreeWalker, traverse_directory, validate_root

__all__ = ["FileSystemNode", "TraversalOutput", "TreeWalker", "traverse_directory", "validate_root"]
