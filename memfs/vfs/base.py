"""Base classes for the in-memory filesystem tree.

The tree is made of two node kinds that share identity (name and parent)
and a common contract (size, type, path, tree snapshot):

Architecture:
    - Node: Base class for all tree nodes
    - DirectoryNode: Ordered container of child nodes (cd into them)
    - FileNode: Leaf with a declared size and no content
    - TreeSnapshot: Immutable, recursively computed view of a subtree
"""

import weakref
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

ROOT_NAME = "root"


class NodeType(Enum):
    """Type of tree node."""
    DIRECTORY = "DIRECTORY"
    FILE = "FILE"


@dataclass(frozen=True)
class TreeSnapshot:
    """Read-only view of a node and its descendants.

    ``size`` is the recursive total at the moment the snapshot was taken,
    not a stored field of the node.
    """
    name: str
    type: NodeType
    size: int
    children: Tuple['TreeSnapshot', ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a nested, JSON-ready dictionary."""
        return {
            "name": self.name,
            "type": self.type.value,
            "size": self.size,
            "children": [child.to_dict() for child in self.children],
        }


class Node(ABC):
    """Base class for all filesystem nodes.

    A Node is either a directory (navigable, owns children) or a file
    (leaf with a declared size).

    Attributes:
        name: The name of this node (unique among its siblings)
        parent: Owning directory (None for the root or a detached node)
        node_type: Type of node (directory or file)
    """

    def __init__(
        self,
        name: str,
        parent: Optional['DirectoryNode'] = None,
        node_type: NodeType = NodeType.FILE,
    ):
        """Initialize a node.

        Args:
            name: Name of this node
            parent: Parent directory (None for root)
            node_type: Type of node
        """
        if not name:
            raise ValueError("Node name cannot be empty")
        self.name = name
        self.node_type = node_type
        self._parent_ref: Optional[weakref.ref] = None
        self.parent = parent

    @property
    def parent(self) -> Optional['DirectoryNode']:
        """Owning directory, or None. Held weakly; children are owned by the parent."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, value: Optional['DirectoryNode']) -> None:
        self._parent_ref = weakref.ref(value) if value is not None else None

    @abstractmethod
    def calculate_size(self) -> int:
        """Compute the size of this node in bytes."""
        pass

    @abstractmethod
    def get_tree_representation(self) -> TreeSnapshot:
        """Build a snapshot of this node and everything below it."""
        pass

    def get_type(self) -> NodeType:
        """Return the node's type tag."""
        return self.node_type

    def get_path(self) -> str:
        """Get absolute path to this node.

        Returns:
            Path like /documents/work, or / for the root
        """
        parent = self.parent
        if parent is None:
            return "/" if self.name == ROOT_NAME else f"/{self.name}"

        parent_path = parent.get_path()
        if parent_path == "/":
            return f"/{self.name}"
        return f"{parent_path}/{self.name}"

    def get_info(self) -> Dict[str, Any]:
        """Get metadata about this node for listings.

        Returns:
            Dict with name, type, size and path
        """
        return {
            "name": self.name,
            "type": self.get_type().value,
            "size": self.calculate_size(),
            "path": self.get_path(),
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}', path='{self.get_path()}')"


class DirectoryNode(Node):
    """A directory that owns an ordered sequence of children.

    Children keep their insertion order. Name uniqueness is checked by
    callers before ``add_child``, not by the directory itself.
    """

    def __init__(self, name: str, parent: Optional['DirectoryNode'] = None):
        """Initialize a directory node.

        Args:
            name: Name of this directory
            parent: Parent directory
        """
        super().__init__(name, parent, NodeType.DIRECTORY)
        self._children: List[Node] = []

    def calculate_size(self) -> int:
        """Sum of the children's sizes, recomputed on every call."""
        return sum(child.calculate_size() for child in self._children)

    def add_child(self, node: Node) -> None:
        """Attach a child at the end of the sequence.

        Args:
            node: File or directory to attach
        """
        node.parent = self
        self._children.append(node)

    def remove_child(self, name: str) -> bool:
        """Remove the first child with the given name.

        Args:
            name: Exact (case-sensitive) child name

        Returns:
            True if a child was removed, False otherwise
        """
        for index, child in enumerate(self._children):
            if child.name == name:
                del self._children[index]
                child.parent = None
                return True
        return False

    def get_child(self, name: str) -> Optional[Node]:
        """Get a child node by name.

        Args:
            name: Name of child node

        Returns:
            First child with that exact name, or None
        """
        for child in self._children:
            if child.name == name:
                return child
        return None

    def get_children(self) -> List[Node]:
        """Copy of the child sequence; mutating it leaves the tree alone."""
        return list(self._children)

    def get_directories(self) -> List['DirectoryNode']:
        return [child for child in self._children if isinstance(child, DirectoryNode)]

    def get_files(self) -> List['FileNode']:
        return [child for child in self._children if isinstance(child, FileNode)]

    def get_tree_representation(self) -> TreeSnapshot:
        return TreeSnapshot(
            name=self.name,
            type=self.node_type,
            size=self.calculate_size(),
            children=tuple(child.get_tree_representation() for child in self._children),
        )


class FileNode(Node):
    """A leaf carrying only a declared size in bytes.

    Files never store content.
    """

    def __init__(
        self,
        name: str,
        size: int = 0,
        parent: Optional[DirectoryNode] = None,
    ):
        """Initialize a file node.

        Args:
            name: Name of this file
            size: Size in bytes
            parent: Parent directory
        """
        if size < 0:
            raise ValueError(f"File size cannot be negative: {size}")
        super().__init__(name, parent, NodeType.FILE)
        self.size = size

    def calculate_size(self) -> int:
        return self.size

    def get_tree_representation(self) -> TreeSnapshot:
        return TreeSnapshot(name=self.name, type=self.node_type, size=self.size)
