import logging
from typing import Iterable, Iterator, Optional

from .index_codec import decode, encode
from .index_entry import IndexEntry, SEPARATOR
from ..core.exceptions import InvalidPathError

logger = logging.getLogger(__name__)


def normalize(path: str) -> str:
    """
    Make a virtual path absolute by prefixing '/' when it is missing.

    Raises:
        InvalidPathError: If the path is empty or cannot live on one index line
    """
    if not path:
        raise InvalidPathError(path, "path is empty")
    if "\n" in path or "\r" in path:
        raise InvalidPathError(path, "path contains a line break")
    return path if path.startswith(SEPARATOR) else SEPARATOR + path


class VirtualDirectory:
    """
    In-memory view of the index.

    A directory is built from the index text at the start of each VFS
    operation and thrown away at the end of it. Directories on the medium
    do not exist; they are derived from path prefixes when listing.
    """

    def __init__(self, entries: Iterable[IndexEntry] = ()):
        self._entries: list[IndexEntry] = list(entries)

    @classmethod
    def from_text(cls, text: str, file_name: str = "index.txt") -> 'VirtualDirectory':
        return cls(decode(text, file_name))

    def to_text(self) -> str:
        return encode(self._entries)

    @property
    def entries(self) -> list[IndexEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[IndexEntry]:
        return iter(self._entries)

    def __contains__(self, path: str) -> bool:
        return self.exists(path)

    def lookup(self, path: str) -> Optional[int]:
        """Return the sector of the file at ``path``, or None when absent."""
        path = normalize(path)
        for entry in self._entries:
            if entry.path == path:
                return entry.sector
        return None

    def exists(self, path: str) -> bool:
        return self.lookup(path) is not None

    def list_children(self, directory: str, recursive: bool = False) -> list[str]:
        """
        List names below ``directory``.

        The directory is treated as ending in '/', so ``/a`` lists ``/a/b.txt``
        as ``b.txt`` and never matches ``/ab.txt``. Each matching path has the
        directory prefix stripped. Without ``recursive``, anything deeper than
        one level collapses to its first segment plus a trailing '/', marking
        a subdirectory. Names are deduplicated in order of first occurrence.
        """
        directory = normalize(directory)
        if not directory.endswith(SEPARATOR):
            directory += SEPARATOR
        names: list[str] = []
        seen: set[str] = set()
        for entry in self._entries:
            if not entry.path.startswith(directory):
                continue
            name = entry.path[len(directory):]
            if not recursive and SEPARATOR in name:
                name = name[:name.index(SEPARATOR) + 1]
            if name not in seen:
                seen.add(name)
                names.append(name)
        return names

    def allocate_sector(self) -> int:
        """First-fit allocation: the smallest sector id no entry uses."""
        used = {entry.sector for entry in self._entries}
        sector = 0
        while sector in used:
            sector += 1
        logger.debug("allocated sector %d (%d in use)", sector, len(used))
        return sector

    def without(self, path: str) -> 'VirtualDirectory':
        """Return a copy with the entry for ``path`` removed."""
        path = normalize(path)
        return VirtualDirectory(e for e in self._entries if e.path != path)
