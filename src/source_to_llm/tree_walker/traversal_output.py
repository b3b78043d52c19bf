"""Accumulator for the two documents produced by one traversal."""

from typing import List, Optional

from anytree import PreOrderIter

from source_to_llm.types import FileType

from .file_system_node import FileSystemNode

CONTENTS_HEADER_TEMPLATE = "/* --- Contents from directory: {root_dir} --- */\n"
FILE_HEADER_TEMPLATE = "\n/* --- File: {relative_path} --- */\n\n"


class TraversalOutput:
    """Append-only structure and contents buffers for a single traversal.

    The structure buffer starts with the root directory's name; the contents buffer starts
    with the optional whole-document header. Text is only ever appended, so whatever was
    collected before a recoverable error remains part of the result.

    Every emitted entry is also mirrored as a FileSystemNode under ``root``, from which the
    summary counts are computed.

    Attributes:
        root (FileSystemNode): Tree of every entry emitted into the structure buffer.

    Example:
        >>> output = TraversalOutput("project")
        >>> node = output.add_entry("└── ", "", "a.txt", FileType.FILE, "a.txt")
        >>> output.structure
        'project\\n└── a.txt\\n'
        >>> output.file_count
        1
    """

    def __init__(self, root_name: str, contents_header: str = "") -> None:
        self.root = FileSystemNode(root_name, file_type=FileType.DIRECTORY)
        self._structure: List[str] = [f"{root_name}\n"]
        self._contents: List[str] = [contents_header] if contents_header else []

    @property
    def structure(self) -> str:
        """The ASCII tree, one newline-terminated line per emitted entry."""
        return "".join(self._structure)

    @property
    def contents(self) -> str:
        """The concatenated text of every included file."""
        return "".join(self._contents)

    def add_entry(
        self,
        connector: str,
        prefix: str,
        name: str,
        file_type: FileType,
        relative_path: str,
        parent: Optional[FileSystemNode] = None,
    ) -> FileSystemNode:
        """Emit one structure line and record the entry in the node tree."""
        self._structure.append(f"{prefix}{connector}{name}\n")
        return FileSystemNode(
            name, parent=parent if parent is not None else self.root, file_type=file_type, relative_path=relative_path
        )

    def add_file_contents(self, node: FileSystemNode, text: str, include_header: bool) -> None:
        """Append a file's full text, preceded by its header when requested."""
        if include_header:
            self._contents.append(FILE_HEADER_TEMPLATE.format(relative_path=node.relative_path))
        self._contents.append(text)
        self._contents.append("\n")
        node.included = True

    def _count(self, file_type: FileType) -> int:
        return sum(1 for node in PreOrderIter(self.root) if node is not self.root and node.file_type is file_type)

    @property
    def directory_count(self) -> int:
        """Number of directories in the structure (excluding root)."""
        return self._count(FileType.DIRECTORY)

    @property
    def file_count(self) -> int:
        """Number of regular files in the structure, whether or not their text was included."""
        return self._count(FileType.FILE)

    @property
    def symlink_count(self) -> int:
        return self._count(FileType.SYMLINK)

    @property
    def binary_count(self) -> int:
        """Number of files left out of the contents because they are not valid text."""
        return sum(1 for node in PreOrderIter(self.root) if node.is_binary)

    @property
    def included_file_count(self) -> int:
        return sum(1 for node in PreOrderIter(self.root) if node.included)
