"""Node representation for entries emitted during a traversal."""

from typing import Any, Optional

from anytree import Node

from source_to_llm.types import FileType


class FileSystemNode(Node):  # type: ignore
    """Node class representing an entry that appeared in the structure output.

    Extends anytree.Node to record what kind of entry was emitted and what happened to it
    while the walker processed it. Inherits tree traversal capabilities from anytree.Node.

    Attributes:
        name (str): The bare name of the entry.
        parent (Optional[FileSystemNode]): The parent node in the tree.
        file_type (FileType): Directory, regular file, symlink or other.
        relative_path (str): Path relative to the traversal root, using forward slashes.
        is_binary (bool): True if the file was skipped because it is not valid text.
        included (bool): True if the file's text made it into the contents output.

    Example:
        >>> root = FileSystemNode("root", file_type=FileType.DIRECTORY)
        >>> child = FileSystemNode("a.txt", parent=root, relative_path="a.txt")
        >>> child.is_dir
        False
        >>> [node.name for node in root.children]
        ['a.txt']
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        file_type: FileType = FileType.FILE,
        relative_path: str = "",
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.file_type = file_type
        self.relative_path = relative_path
        self.is_binary = False
        self.included = False

    @property
    def is_dir(self) -> bool:
        return self.file_type is FileType.DIRECTORY
