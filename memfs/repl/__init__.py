"""REPL shell for interactive filesystem navigation.

This module provides an interactive shell for navigating and changing
the in-memory filesystem with shell-like commands.
"""

from memfs.repl.shell import FileSystemShell

__all__ = ["FileSystemShell"]
