"""MemoryVFS - the process-wide filesystem state."""

import threading
from typing import List, Optional

from memfs.vfs.base import DirectoryNode
from memfs.vfs.resolver import PathResolver
from memfs.vfs.seed import build_sample_tree


class MemoryVFS:
    """In-memory filesystem state: a root and one shared cursor.

    The cursor is shared by every caller; a ``cd`` by one client is seen
    by all others. ``lock`` serialises whole operations, reads included.

    Usage:
        >>> vfs = MemoryVFS()
        >>> work = vfs.resolver.resolve("/documents/work", vfs.current)
        >>> vfs.cd(work)
        >>> vfs.pwd()
        '/documents/work'
    """

    def __init__(self, root: Optional[DirectoryNode] = None):
        """Initialize filesystem state.

        Args:
            root: Root directory; the sample tree is built when omitted
        """
        self.root = root if root is not None else build_sample_tree()
        self.resolver = PathResolver(self.root)
        self.current = self.root  # Current working directory
        self.lock = threading.RLock()

    def cd(self, directory: DirectoryNode) -> None:
        """Move the cursor to an already resolved directory.

        Args:
            directory: Directory reachable from the root
        """
        with self.lock:
            self.current = directory

    def pwd(self) -> str:
        """Get current working directory path.

        Returns:
            Current path
        """
        with self.lock:
            return self.current.get_path()

    def complete(self, partial: str) -> List[str]:
        """Get tab completion candidates.

        Args:
            partial: Partial path

        Returns:
            List of completion candidates
        """
        with self.lock:
            return self.resolver.complete_path(partial, self.current)
