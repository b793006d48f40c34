"""
Services for memfs operations.

Provides the operation layer shared by the web server, the shell and the CLI.
"""

from .filesystem_service import (
    FileSystemService,
    DirectoryListing,
    DirectorySize,
    CurrentPath,
    EntryInfo,
)

__all__ = [
    'FileSystemService',

    # Result records
    'DirectoryListing',
    'DirectorySize',
    'CurrentPath',
    'EntryInfo',
]
