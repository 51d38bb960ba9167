"""Custom exceptions for the virtual file system."""


class VFSException(Exception):
    """Base exception for virtual file system errors."""
    pass


class InitializationError(VFSException):
    """Raised when the index file cannot be created on first run."""

    def __init__(self, file_name: str, reason: str = ""):
        message = f"VFS_INIT_FAILED ({file_name})"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_name = file_name


class IndexUnavailable(VFSException):
    """Raised when the index file cannot be opened for reading."""

    def __init__(self, file_name: str, reason: str = ""):
        message = f"INDEX_UNAVAILABLE ({file_name})"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_name = file_name


class CorruptIndexError(IndexUnavailable):
    """Raised when an index line cannot be decoded into an entry."""

    def __init__(self, file_name: str, line_number: int, line: str):
        super().__init__(file_name, f"malformed record at line {line_number}: {line!r}")
        self.line_number = line_number
        self.line = line


class FileNotFound(VFSException):
    """Raised when an operation requires a virtual file that is absent."""

    def __init__(self, path: str):
        super().__init__(f"FILE_NOT_FOUND ({path})")
        self.path = path


class FileAlreadyExists(VFSException):
    """Raised when creating a virtual file that is present without overwrite."""

    def __init__(self, path: str):
        super().__init__(f"FILE_ALREADY_EXISTS ({path})")
        self.path = path


class CannotOpenFile(VFSException):
    """Raised when the sector store refuses to open an index or sector file."""

    def __init__(self, file_name: str, reason: str = ""):
        message = f"CANNOT_OPEN_FILE ({file_name})"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_name = file_name


class InvalidPathError(VFSException, ValueError):
    """Raised when a virtual path cannot be stored in the index."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"INVALID_PATH ({path!r}): {reason}")
        self.path = path
