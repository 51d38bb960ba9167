import logging
import threading
from pathlib import Path
from typing import Optional, Union

from .catalog import IndexEntry, IndexPersistence, VirtualDirectory, normalize
from .catalog.index_entry import SEPARATOR
from .core.config import VFSConfig
from .core.exceptions import (
    CannotOpenFile,
    FileAlreadyExists,
    FileNotFound,
    InitializationError,
    InvalidPathError,
)
from .storage import SectorStore, StorageError

logger = logging.getLogger(__name__)


class VirtualFileSystem:
    """
    Hierarchical virtual files on top of a flat sector store.

    The store only holds numbered sector files plus one index file mapping
    virtual paths to sectors. Every operation follows the same pattern:

    1. Read and decode the whole index
    2. Work on the resulting in-memory directory
    3. For mutations, write the index back (append on create, full rewrite
       on delete)

    Nothing is cached between calls, so the index file is always the source
    of truth. Per virtual path the lifecycle is::

        Absent --create_file--> Present --delete_file--> Absent

    ``create_file`` with ``overwrite=True`` on a present path deletes it and
    creates it again, which usually moves it to a different sector.

    Failures are not rolled back: if the index cannot be rewritten after a
    sector was truncated, the two stay out of step and the error is raised
    to the caller.
    """

    def __init__(self, config: Optional[VFSConfig] = None,
                 store: Optional[SectorStore] = None):
        self.config = config or VFSConfig()
        self.config.validate()

        self.store = store or SectorStore(self.config.base_directory,
                                          self.config.sector_prefix,
                                          self.config.encoding)
        self.index = IndexPersistence(self.store, self.config.index_file_name,
                                      self.config.atomic_index_writes)

        # Serializes index reads and read-index -> mutate -> write-index for
        # callers that share this instance. Other processes are not excluded.
        self._lock = threading.RLock()

    def init(self) -> None:
        """
        Make sure the index file exists, creating an empty one if absent.

        Raises:
            InitializationError: If the index file cannot be created
        """
        with self._lock:
            index_name = self.config.index_file_name
            try:
                if self.config.create_base_directory:
                    self.store.ensure_base_directory()
                if not self.index.exists():
                    self.index.create_empty()
                    logger.info("created empty index %s", self.store.path_of(index_name))
            except StorageError as e:
                raise InitializationError(index_name, str(e)) from e
            logger.info("VFS initialized at %s", self.store.base_dir)

    def read_index(self) -> VirtualDirectory:
        """
        Load the current index.

        Raises:
            IndexUnavailable: If the index file cannot be read
        """
        with self._lock:
            return self.index.load()

    def get_sector(self, path: str) -> Optional[int]:
        """Return the sector holding ``path``, or None if there is no such file."""
        return self.read_index().lookup(path)

    def list_directory(self, path: str = SEPARATOR, recursive: bool = False) -> list[str]:
        """
        List the files and subdirectories below ``path``.

        Subdirectories are reported as ``name/`` unless ``recursive`` is set,
        in which case every file below ``path`` is listed by its relative path.
        """
        return self.read_index().list_children(path, recursive)

    def file_exists(self, path: str) -> bool:
        return self.read_index().exists(path)

    def delete_file(self, path: str) -> None:
        """
        Delete a virtual file.

        The sector file is emptied but kept on the medium so that a later
        create can reuse it.

        Raises:
            FileNotFound: If no file exists at ``path``
            CannotOpenFile: If the sector or the index cannot be written
        """
        path = normalize(path)
        with self._lock:
            directory = self.read_index()
            sector = directory.lookup(path)
            if sector is None:
                raise FileNotFound(path)

            sector_name = self.store.sector_name(sector)
            try:
                self.store.truncate(sector_name)
            except StorageError as e:
                raise CannotOpenFile(sector_name, str(e)) from e

            try:
                self.index.save(directory.without(path))
            except CannotOpenFile:
                logger.warning("sector %s was emptied but %s still lists %s",
                               sector_name, self.config.index_file_name, path)
                raise
            logger.info("deleted %s (sector %d)", path, sector)

    def create_file(self, path: str, overwrite: bool = True) -> int:
        """
        Create an empty virtual file and return its sector.

        Args:
            path: Virtual path of the new file
            overwrite: Replace an existing file instead of failing

        Returns:
            The sector id allocated to the file

        Raises:
            FileAlreadyExists: If the file exists and ``overwrite`` is False
            CannotOpenFile: If the index or the sector file cannot be written
            InvalidPathError: If ``path`` names a directory
        """
        path = normalize(path)
        if path.endswith(SEPARATOR):
            raise InvalidPathError(path, "a file path cannot end with '/'")

        with self._lock:
            directory = self.read_index()
            if directory.exists(path):
                if not overwrite:
                    raise FileAlreadyExists(path)
                self.delete_file(path)
                directory = self.read_index()

            sector = directory.allocate_sector()
            self.index.append(IndexEntry(path, sector))

            sector_name = self.store.sector_name(sector)
            try:
                self.store.truncate(sector_name)
            except StorageError as e:
                raise CannotOpenFile(sector_name, str(e)) from e

            logger.info("created %s in sector %d", path, sector)
            return sector

    def sector_path(self, path: str) -> Path:
        """
        Host location of the sector file backing ``path``.

        Raises:
            FileNotFound: If no file exists at ``path``
        """
        return self.store.path_of(self.store.sector_name(self._require_sector(path)))

    def read_file(self, path: str) -> bytes:
        """
        Return the full content of a virtual file.

        Raises:
            FileNotFound: If no file exists at ``path``
            CannotOpenFile: If the sector file cannot be read
        """
        with self._lock:
            sector_name = self.store.sector_name(self._require_sector(path))
            try:
                return self.store.read_bytes(sector_name)
            except StorageError as e:
                raise CannotOpenFile(sector_name, str(e)) from e

    def write_file(self, path: str, data: Union[bytes, str], create: bool = True) -> int:
        """
        Replace the content of a virtual file and return its sector.

        A missing file is created first when ``create`` is set.

        Raises:
            FileNotFound: If the file is absent and ``create`` is False
            CannotOpenFile: If the sector file cannot be written
        """
        with self._lock:
            sector = self.get_sector(path)
            if sector is None:
                if not create:
                    raise FileNotFound(normalize(path))
                sector = self.create_file(path, overwrite=False)
            self._write_sector(sector, self._to_bytes(data), append=False)
            return sector

    def append_file(self, path: str, data: Union[bytes, str]) -> int:
        """
        Append to an existing virtual file and return its sector.

        Raises:
            FileNotFound: If no file exists at ``path``
            CannotOpenFile: If the sector file cannot be written
        """
        with self._lock:
            sector = self._require_sector(path)
            self._write_sector(sector, self._to_bytes(data), append=True)
            return sector

    def _require_sector(self, path: str) -> int:
        sector = self.get_sector(path)
        if sector is None:
            raise FileNotFound(normalize(path))
        return sector

    def _write_sector(self, sector: int, data: bytes, append: bool) -> None:
        sector_name = self.store.sector_name(sector)
        try:
            if append:
                self.store.append_bytes(sector_name, data)
            else:
                self.store.write_bytes(sector_name, data)
        except StorageError as e:
            raise CannotOpenFile(sector_name, str(e)) from e

    def _to_bytes(self, data: Union[bytes, str]) -> bytes:
        if isinstance(data, str):
            return data.encode(self.config.encoding)
        return bytes(data)
