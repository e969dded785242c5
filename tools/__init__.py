"""Tools module for external collaborators.

Provides narrow, substitutable wrappers for:
- External programs (git clone, cargo build)
- Filesystem (existence checks, copies, removals, walks)
"""

from .base import ToolResult, ToolStatus
from .command_runner import CommandRunner, SubprocessRunner
from .filesystem import FileSystem, LocalFileSystem

__all__ = [
    "ToolResult",
    "ToolStatus",
    "CommandRunner",
    "SubprocessRunner",
    "FileSystem",
    "LocalFileSystem",
]
