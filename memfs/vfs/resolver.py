"""Path resolution for the in-memory filesystem.

Handles path parsing and navigation (cd, tree semantics).
"""

from typing import List, Optional

from memfs.vfs.base import DirectoryNode
from memfs.vfs.errors import InvalidPathError


class PathResolver:
    """Resolves path strings to directories.

    This class provides the core navigation logic for cd and tree.
    It handles:
    - Absolute paths: /documents/work
    - Relative paths: ../projects, ./work, work//reports
    - Special segments: . and .. (.. stops at the root)

    Only directories are ever returned; no operation addresses a file by path.
    """

    def __init__(self, root: DirectoryNode):
        """Initialize path resolver.

        Args:
            root: Root node of the tree
        """
        self.root = root

    def resolve(self, path: Optional[str], current: DirectoryNode) -> Optional[DirectoryNode]:
        """Resolve a path to a directory.

        Args:
            path: Path to resolve (absolute or relative)
            current: Current working directory

        Returns:
            Resolved directory, or None if a segment is missing or is a file

        Raises:
            InvalidPathError: If the path is None, empty or whitespace only
        """
        if path is None or not path.strip():
            raise InvalidPathError("Path cannot be empty")

        path = path.strip()
        if path.startswith("/"):
            return self._resolve_absolute(path)
        return self._resolve_relative(path, current)

    def complete_path(self, partial: str, current: DirectoryNode) -> List[str]:
        """Get completion candidates for a partial directory path.

        Used for tab completion.

        Args:
            partial: Partial path to complete
            current: Current working directory

        Returns:
            List of completion candidates, directories suffixed with /
        """
        if "/" in partial:
            dir_part, name_part = partial.rsplit("/", 1)
            base = dir_part if dir_part or not partial.startswith("/") else "/"
            try:
                dir_node = self.resolve(base, current)
            except InvalidPathError:
                return []
            prefix = partial[: len(partial) - len(name_part)]
        else:
            dir_node = current
            name_part = partial
            prefix = ""

        if dir_node is None:
            return []

        return [
            f"{prefix}{child.name}/"
            for child in dir_node.get_directories()
            if child.name.startswith(name_part)
        ]

    def _resolve_absolute(self, path: str) -> Optional[DirectoryNode]:
        """Walk from the root. Dot segments are ordinary names here."""
        if path == "/":
            return self.root

        node = self.root
        for part in path[1:].split("/"):
            if not part:
                continue

            child = node.get_child(part)
            if not isinstance(child, DirectoryNode):
                return None
            node = child

        return node

    def _resolve_relative(self, path: str, current: DirectoryNode) -> Optional[DirectoryNode]:
        """Walk from the cursor, honouring . and .."""
        node = current
        for part in path.split("/"):
            if part == "" or part == ".":
                continue

            if part == "..":
                # Stay at root if already at root
                if node.parent is not None:
                    node = node.parent
                continue

            child = node.get_child(part)
            if not isinstance(child, DirectoryNode):
                return None
            node = child

        return node
