from .config import VFSConfig
from .exceptions import (
    VFSException,
    InitializationError,
    IndexUnavailable,
    CorruptIndexError,
    FileNotFound,
    FileAlreadyExists,
    CannotOpenFile,
    InvalidPathError,
)
from .logger import configure_logging

__all__ = [
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
