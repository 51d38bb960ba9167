"""
Text codec for the index file.

The index holds one record per line, ``<absolute-virtual-path>/<sector-id>``,
each terminated by a newline. The sector id is recovered by splitting on the
last ``/`` of the line, so paths may contain any number of separators.
"""
from typing import Iterable

from .index_entry import IndexEntry
from ..core.exceptions import CorruptIndexError

DEFAULT_INDEX_NAME = "index.txt"


def encode(entries: Iterable[IndexEntry]) -> str:
    """Serialize entries to index text, one newline-terminated record each."""
    return "".join(entry.to_line() + "\n" for entry in entries)


def decode(text: str, file_name: str = DEFAULT_INDEX_NAME) -> list[IndexEntry]:
    """
    Parse index text into entries, in file order.

    Blank lines are skipped, so the terminal newline never yields an entry.

    Raises:
        CorruptIndexError: If a non-blank line is not a valid record
    """
    entries = []
    for line_number, line in enumerate(text.split("\n"), start=1):
        line = line.rstrip("\r")
        if not line.strip():
            continue
        try:
            entries.append(IndexEntry.from_line(line))
        except ValueError:
            raise CorruptIndexError(file_name, line_number, line) from None
    return entries
