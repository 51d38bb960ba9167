import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .exceptions import StorageError

logger = logging.getLogger(__name__)


@dataclass
class SectorStoreStats:
    files_read: int = 0
    files_written: int = 0
    bytes_read: int = 0
    bytes_written: int = 0


class SectorStore:
    """
    Flat file namespace on the host filesystem.

    The store only knows about flat names inside its base directory: numbered
    sector files and the reserved index file. Every call opens and closes its
    own handle, and every OS failure is reported as a StorageError naming
    the file involved.
    """

    TEMP_SUFFIX = ".tmp"

    def __init__(self, base_directory: str = "vfs_data", sector_prefix: str = "",
                 encoding: str = "utf-8"):
        self.base_dir = Path(base_directory)
        self.sector_prefix = sector_prefix
        self.encoding = encoding
        self.stats = SectorStoreStats()

    def ensure_base_directory(self) -> None:
        """Create the base directory (and parents) if it is missing"""
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to create {self.base_dir}: {e}", str(self.base_dir)) from e

    def sector_name(self, sector: int) -> str:
        """Flat file name of a sector: its decimal id behind the prefix"""
        if sector < 0:
            raise ValueError(f"Sector ids are non-negative, got {sector}")
        return f"{self.sector_prefix}{sector}"

    def path_of(self, name: str) -> Path:
        """Host path of a flat file in this store"""
        if not name or "/" in name or os.sep in name:
            raise ValueError(f"Store file names must be flat, got {name!r}")
        return self.base_dir / name

    def exists(self, name: str) -> bool:
        return self.path_of(name).is_file()

    def file_size(self, name: str) -> int:
        """Size of a stored file in bytes, 0 when absent"""
        try:
            return self.path_of(name).stat().st_size
        except FileNotFoundError:
            return 0

    def read_bytes(self, name: str) -> bytes:
        """
        Read the whole content of a stored file.

        Raises:
            StorageError: If the file is absent or cannot be opened
        """
        path = self.path_of(name)
        try:
            with open(path, 'rb') as f:
                data = f.read()
        except FileNotFoundError:
            raise StorageError(f"File not found: {path}", name)
        except OSError as e:
            raise StorageError(f"Failed to read {path}: {e}", name) from e

        self.stats.files_read += 1
        self.stats.bytes_read += len(data)
        return data

    def read_text(self, name: str) -> str:
        return self.read_bytes(name).decode(self.encoding)

    def write_bytes(self, name: str, data: bytes) -> None:
        """Replace the content of a file, creating it if absent"""
        self._write(name, data, 'wb')

    def append_bytes(self, name: str, data: bytes) -> None:
        """Append to a file, creating it if absent"""
        self._write(name, data, 'ab')

    def write_text(self, name: str, text: str) -> None:
        self.write_bytes(name, text.encode(self.encoding))

    def append_text(self, name: str, text: str) -> None:
        self.append_bytes(name, text.encode(self.encoding))

    def truncate(self, name: str) -> None:
        """Empty a file without removing it"""
        self._write(name, b"", 'wb')

    def touch(self, name: str) -> None:
        """Create an empty file if it does not exist yet"""
        self._write(name, b"", 'ab')

    def replace_text(self, name: str, text: str) -> None:
        """
        Rewrite a file through a temporary sibling and an atomic rename.

        Readers see either the old content or the new one, never a partial
        write.
        """
        temp_name = name + self.TEMP_SUFFIX
        self.write_text(temp_name, text)
        try:
            os.replace(self.path_of(temp_name), self.path_of(name))
        except OSError as e:
            try:
                self.path_of(temp_name).unlink(missing_ok=True)
            except OSError as cleanup_error:
                logger.warning("could not remove %s: %s", temp_name, cleanup_error)
            raise StorageError(
                f"Failed to replace {self.path_of(name)}: {e}", name) from e

    def delete(self, name: str) -> None:
        path = self.path_of(name)
        try:
            path.unlink()
        except FileNotFoundError:
            raise StorageError(f"File not found: {path}", name)
        except OSError as e:
            raise StorageError(f"Failed to delete {path}: {e}", name) from e

    def _write(self, name: str, data: bytes, mode: str) -> None:
        path = self.path_of(name)
        try:
            with open(path, mode) as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
        except OSError as e:
            raise StorageError(f"Failed to open {path} for writing: {e}", name) from e

        self.stats.files_written += 1
        self.stats.bytes_written += len(data)
        logger.debug("wrote %d bytes to %s (mode %s)", len(data), name, mode)
