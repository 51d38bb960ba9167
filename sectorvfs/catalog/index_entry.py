from dataclasses import dataclass

SEPARATOR = "/"


@dataclass(frozen=True)
class IndexEntry:
    """
    One virtual file in the index.

    🗂️ Maps an absolute virtual path to the sector file holding its bytes.
    """

    """📍 Absolute virtual path, always starting with '/'"""
    path: str

    """🔢 Id of the sector file holding the content"""
    sector: int

    def to_line(self) -> str:
        """
        📝 Render this entry as one index record (without the newline).

        Returns:
            str: ``<path>/<sector>``
        """
        return f"{self.path}{SEPARATOR}{self.sector}"

    @classmethod
    def from_line(cls, line: str) -> 'IndexEntry':
        """
        📥 Parse one index record, splitting on the last separator.

        Args:
            line: Record text without its line terminator

        Returns:
            IndexEntry: The decoded entry

        Raises:
            ValueError: If the record has no separator or a malformed sector
        """
        path, separator, sector = line.rpartition(SEPARATOR)
        if not separator or not path:
            raise ValueError(f"Record has no path/sector separator: {line!r}")
        if not sector.isdigit() or not sector.isascii():
            raise ValueError(f"Record has an invalid sector id: {line!r}")
        if sector != "0" and sector.startswith("0"):
            # sector file names are canonical decimals
            raise ValueError(f"Record has a non-canonical sector id: {line!r}")
        return cls(path, int(sector))
