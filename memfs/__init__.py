"""
memfs - an in-memory hierarchical filesystem with shell-like operations.

Main API:
    from memfs import FileSystemService, MemoryVFS

    # Seeded sample tree with the cursor at /
    service = FileSystemService(MemoryVFS())

    service.change_directory("/documents/work")
    service.create_directory("drafts")
    print(service.get_current_path().path)      # /documents/work
    print(service.get_directory_size().size)    # 11776
    print(service.get_directory_tree("..").to_dict())
"""

from .services import FileSystemService
from .vfs import MemoryVFS

__version__ = "0.1.0"
__all__ = ["FileSystemService", "MemoryVFS"]
