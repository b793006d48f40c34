"""In-memory virtual filesystem.

The VFS models a small hierarchical filesystem entirely in memory and
is navigated with familiar shell commands (cd, ls, pwd, tree, ...).

Architecture:

    ```
    /                           # Root (DirectoryNode named "root")
    ├── documents/              # DirectoryNode
    │   ├── work/
    │   │   ├── reports/
    │   │   ├── invoices/
    │   │   ├── report1.pdf     # FileNode (size only, no content)
    │   │   └── report2.pdf
    │   ├── personal/
    │   └── readme.txt
    ├── projects/
    └── downloads/
    ```

Node Types:

    - Node: Base class for all entries
    - DirectoryNode: Ordered children, size is the recursive sum
    - FileNode: Leaf with a declared size

Path Resolution:

    The PathResolver handles navigation:
    - Absolute paths: /documents/work
    - Relative paths: ../projects, ./work
    - Special: ., .. (clamped at the root)

Usage Example:

    ```python
    from memfs.vfs import MemoryVFS

    vfs = MemoryVFS()
    work = vfs.resolver.resolve("documents/work", vfs.current)
    print(work.get_path(), work.calculate_size())
    print(vfs.root.get_tree_representation().to_dict())
    ```
"""

from memfs.vfs.base import (
    Node,
    DirectoryNode,
    FileNode,
    NodeType,
    TreeSnapshot,
)
from memfs.vfs.errors import (
    FileSystemError,
    InvalidPathError,
    InvalidArgumentError,
    DirectoryNotFoundError,
    DirectoryAlreadyExistsError,
)
from memfs.vfs.resolver import PathResolver
from memfs.vfs.seed import build_sample_tree
from memfs.vfs.memory_vfs import MemoryVFS

__all__ = [
    # Main entry point
    "MemoryVFS",
    "build_sample_tree",
    # Core classes
    "Node",
    "DirectoryNode",
    "FileNode",
    "NodeType",
    "TreeSnapshot",
    # Path resolution
    "PathResolver",
    # Failures
    "FileSystemError",
    "InvalidPathError",
    "InvalidArgumentError",
    "DirectoryNotFoundError",
    "DirectoryAlreadyExistsError",
]
