"""
Filesystem service implementing the shell operations.

Provides cd, ls, size, mkdir, rmdir, pwd and tree against the shared
in-memory filesystem state.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import logging

from ..vfs.base import DirectoryNode, Node, TreeSnapshot
from ..vfs.errors import (
    DirectoryAlreadyExistsError,
    DirectoryNotFoundError,
    InvalidArgumentError,
    InvalidPathError,
)
from ..vfs.memory_vfs import MemoryVFS

logger = logging.getLogger(__name__)

PATH_SEPARATORS = ("/", "\\")


@dataclass
class EntryInfo:
    """One row of a directory listing."""
    name: str
    type: str
    size: int
    path: str

    @classmethod
    def from_node(cls, node: Node) -> 'EntryInfo':
        return cls(**node.get_info())

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "type": self.type, "size": self.size, "path": self.path}


@dataclass
class DirectoryListing:
    """Immediate children of a directory, split by kind."""
    current_path: str
    directories: List[EntryInfo] = field(default_factory=list)
    files: List[EntryInfo] = field(default_factory=list)

    @property
    def total_items(self) -> int:
        return len(self.directories) + len(self.files)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "currentPath": self.current_path,
            "directories": [entry.to_dict() for entry in self.directories],
            "files": [entry.to_dict() for entry in self.files],
            "totalItems": self.total_items,
        }


@dataclass
class DirectorySize:
    """Recursive size of a directory in bytes, KB and MB."""
    path: str
    size: int

    @property
    def size_in_kb(self) -> float:
        return self.size / 1024.0

    @property
    def size_in_mb(self) -> float:
        return self.size / (1024.0 * 1024.0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "size": self.size,
            "sizeInKB": self.size_in_kb,
            "sizeInMB": self.size_in_mb,
        }


@dataclass
class CurrentPath:
    path: str
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"path": self.path, "name": self.name}


class FileSystemService:
    """Service for the seven shell operations on a MemoryVFS.

    Every operation holds the VFS lock for its whole duration and either
    completes or raises a FileSystemError without touching the state.
    """

    def __init__(self, vfs: MemoryVFS):
        """
        Initialize the filesystem service.

        Args:
            vfs: Shared filesystem state
        """
        self.vfs = vfs

    def change_directory(self, path: Optional[str]) -> DirectoryNode:
        """
        Change directory - supports relative and absolute paths.

        Args:
            path: Path to navigate to

        Returns:
            The new current directory

        Raises:
            InvalidPathError: If the path is empty
            DirectoryNotFoundError: If the path does not lead to a directory
        """
        with self.vfs.lock:
            target = self.vfs.resolver.resolve(path, self.vfs.current)
            if target is None:
                raise DirectoryNotFoundError(f"Directory not found: {path}")

            self.vfs.cd(target)
            logger.info(f"Changed directory to {target.get_path()}")
            return target

    def list_directory(self) -> DirectoryListing:
        """
        List the current directory's immediate children.

        Returns:
            Listing with directories and files in child order
        """
        with self.vfs.lock:
            current = self.vfs.current
            listing = DirectoryListing(current_path=current.get_path())

            for child in current.get_children():
                entry = EntryInfo.from_node(child)
                if isinstance(child, DirectoryNode):
                    listing.directories.append(entry)
                else:
                    listing.files.append(entry)

            logger.debug(f"Listed {listing.total_items} items in {listing.current_path}")
            return listing

    def get_directory_size(self) -> DirectorySize:
        """
        Calculate the recursive size of the current directory.

        Returns:
            Size in bytes with KB/MB conversions
        """
        with self.vfs.lock:
            current = self.vfs.current
            return DirectorySize(path=current.get_path(), size=current.calculate_size())

    def create_directory(self, name: Optional[str]) -> DirectoryNode:
        """
        Create a new empty directory under the current directory.

        Args:
            name: Name of the new directory (no path separators)

        Returns:
            The created directory

        Raises:
            InvalidArgumentError: If the name is empty
            InvalidPathError: If the name contains a path separator
            DirectoryAlreadyExistsError: If any child already has that name
        """
        if name is None or not name.strip():
            raise InvalidArgumentError("Directory name cannot be empty")

        if any(sep in name for sep in PATH_SEPARATORS):
            raise InvalidPathError("Directory name cannot contain path separators")

        with self.vfs.lock:
            current = self.vfs.current
            if current.get_child(name) is not None:
                raise DirectoryAlreadyExistsError(f"Directory already exists: {name}")

            directory = DirectoryNode(name)
            current.add_child(directory)
            logger.info(f"Created directory {directory.get_path()}")
            return directory

    def remove_directory(self, name: Optional[str]) -> DirectoryNode:
        """
        Remove a child directory of the current directory.

        Args:
            name: Name of the directory to remove

        Returns:
            The removed (now detached) directory

        Raises:
            InvalidArgumentError: If the name is empty, names a file, or
                names the current or root directory
            DirectoryNotFoundError: If no child has that name
        """
        if name is None or not name.strip():
            raise InvalidArgumentError("Directory name cannot be empty")

        with self.vfs.lock:
            current = self.vfs.current
            entity = current.get_child(name)
            if entity is None:
                raise DirectoryNotFoundError(f"Directory not found: {name}")

            if not isinstance(entity, DirectoryNode):
                raise InvalidArgumentError(f"Entity is not a directory: {name}")

            # Neither can be a child of the current directory while the tree is intact
            if entity is self.vfs.current:
                raise InvalidArgumentError("Cannot remove current directory")

            if entity is self.vfs.root:
                raise InvalidArgumentError("Cannot remove root directory")

            path = entity.get_path()
            current.remove_child(name)
            logger.info(f"Removed directory {path}")
            return entity

    def get_current_path(self) -> CurrentPath:
        """
        Get the current directory's path and name.

        Returns:
            Path and name of the cursor
        """
        with self.vfs.lock:
            current = self.vfs.current
            return CurrentPath(path=current.get_path(), name=current.name)

    def get_directory_tree(self, path: Optional[str] = None) -> TreeSnapshot:
        """
        Get a snapshot of a directory and everything below it.

        Args:
            path: Directory to snapshot; the root when None, blank or "/"

        Returns:
            Tree snapshot with live recursive sizes

        Raises:
            DirectoryNotFoundError: If the path does not lead to a directory
        """
        with self.vfs.lock:
            if path is None or not path.strip() or path == "/":
                target = self.vfs.root
            else:
                target = self.vfs.resolver.resolve(path, self.vfs.current)
                if target is None:
                    raise DirectoryNotFoundError(f"Directory not found: {path}")

            logger.debug(f"Building tree for {target.get_path()}")
            return target.get_tree_representation()
