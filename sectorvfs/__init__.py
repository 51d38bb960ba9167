"""
SectorVFS: named, hierarchical virtual files on a medium that only stores
flat numbered sector files and one index file.
"""

from .core import (
    VFSConfig,
    VFSException,
    InitializationError,
    IndexUnavailable,
    CorruptIndexError,
    FileNotFound,
    FileAlreadyExists,
    CannotOpenFile,
    InvalidPathError,
    configure_logging,
)
from .vfs import VirtualFileSystem

__version__ = "0.1.0"

__all__ = [
    "VirtualFileSystem",
    "VFSConfig",
    "VFSException",
    "InitializationError",
    "IndexUnavailable",
    "CorruptIndexError",
    "FileNotFound",
    "FileAlreadyExists",
    "CannotOpenFile",
    "InvalidPathError",
    "configure_logging",
]
