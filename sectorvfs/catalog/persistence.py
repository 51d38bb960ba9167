"""
Index persistence module.
Handles loading/saving the index file through the sector store.
"""
import logging

from .directory import VirtualDirectory
from .index_entry import IndexEntry
from ..core.exceptions import CannotOpenFile, IndexUnavailable
from ..storage import SectorStore, StorageError

logger = logging.getLogger(__name__)


class IndexPersistence:
    """Handles index file persistence operations."""

    def __init__(self, store: SectorStore, index_name: str = "index.txt",
                 atomic_writes: bool = True):
        self.store = store
        self.index_name = index_name
        self.atomic_writes = atomic_writes

    def exists(self) -> bool:
        return self.store.exists(self.index_name)

    def create_empty(self) -> None:
        """Create an empty index if none exists yet."""
        self.store.touch(self.index_name)

    def load(self) -> VirtualDirectory:
        """Read and decode the whole index."""
        try:
            text = self.store.read_text(self.index_name)
        except StorageError as e:
            raise IndexUnavailable(self.index_name, str(e)) from e
        except UnicodeDecodeError as e:
            raise IndexUnavailable(self.index_name, f"not valid text: {e}") from e

        directory = VirtualDirectory.from_text(text, self.index_name)
        logger.debug("loaded %d index entries from %s", len(directory), self.index_name)
        return directory

    def save(self, directory: VirtualDirectory) -> None:
        """Rewrite the whole index from ``directory``."""
        text = directory.to_text()
        try:
            if self.atomic_writes:
                self.store.replace_text(self.index_name, text)
            else:
                self.store.write_text(self.index_name, text)
        except StorageError as e:
            raise CannotOpenFile(self.index_name, str(e)) from e
        logger.debug("rewrote %s with %d entries", self.index_name, len(directory))

    def append(self, entry: IndexEntry) -> None:
        """Append one record to the end of the index."""
        try:
            self.store.append_text(self.index_name, entry.to_line() + "\n")
        except StorageError as e:
            raise CannotOpenFile(self.index_name, str(e)) from e
