import pytest

from sectorvfs.catalog import IndexEntry, encode, decode
from sectorvfs.core.exceptions import CorruptIndexError


class TestIndexEntry:
    """Tests for single index records."""

    def test_to_line(self):
        """Test that an entry renders as path, separator, sector."""
        assert IndexEntry("/a/b.txt", 3).to_line() == "/a/b.txt/3"

    def test_from_line_splits_on_last_separator(self):
        """Test that only the last '/' separates the sector."""
        entry = IndexEntry.from_line("/logs/2024/run.txt/12")
        assert entry.path == "/logs/2024/run.txt"
        assert entry.sector == 12

    def test_from_line_numeric_last_segment(self):
        """Test a path whose last segment is itself numeric."""
        entry = IndexEntry.from_line("/data/7/0")
        assert entry == IndexEntry("/data/7", 0)

    def test_from_line_sector_zero(self):
        """Test that a lone zero is a canonical sector id."""
        assert IndexEntry.from_line("/a/0").sector == 0

    @pytest.mark.parametrize("line", [
        "no-separator",
        "/a/b.txt/",
        "/a/b.txt/x1",
        "/a/b.txt/-1",
        "/5",
        "/a/007",
        "/a/00",
    ])
    def test_from_line_rejects_malformed(self, line):
        """Test that malformed or non-canonical records raise ValueError."""
        with pytest.raises(ValueError):
            IndexEntry.from_line(line)

    def test_entries_are_hashable(self):
        """Test that equal entries collapse in a set."""
        assert len({IndexEntry("/a", 0), IndexEntry("/a", 0)}) == 1


class TestIndexCodec:
    """Tests for encoding and decoding the whole index."""

    def test_encode_one_line_per_entry(self):
        """Test that every entry becomes one newline-terminated line."""
        text = encode([IndexEntry("/a/b.txt", 0), IndexEntry("/d.txt", 1)])
        assert text == "/a/b.txt/0\n/d.txt/1\n"

    def test_encode_empty(self):
        """Test that an empty index encodes to an empty string."""
        assert encode([]) == ""

    def test_decode_empty(self):
        """Test that an empty file decodes to no entries."""
        assert decode("") == []

    def test_decode_skips_blank_lines(self):
        """Test that blank and whitespace-only lines are ignored."""
        assert decode("/a/0\n\n   \n/b/1\n") == [IndexEntry("/a", 0), IndexEntry("/b", 1)]

    def test_decode_without_final_newline(self):
        """Test that the last record does not need a terminator."""
        assert decode("/a/0") == [IndexEntry("/a", 0)]

    def test_decode_strips_carriage_returns(self):
        """Test that CRLF line endings decode like LF."""
        assert decode("/a/0\r\n/b/1\r\n") == [IndexEntry("/a", 0), IndexEntry("/b", 1)]

    def test_decode_preserves_order(self):
        """Test that entries come back in file order."""
        entries = decode("/z/2\n/a/0\n/m/1\n")
        assert [e.path for e in entries] == ["/z", "/a", "/m"]

    def test_decode_corrupt_line_reports_position(self):
        """Test that a bad record names its file, line number and text."""
        with pytest.raises(CorruptIndexError) as exc_info:
            decode("/a/0\nbroken\n", file_name="index.txt")
        assert exc_info.value.line_number == 2
        assert exc_info.value.line == "broken"
        assert exc_info.value.file_name == "index.txt"

    def test_decode_rejects_leading_zero_sector(self):
        """Test that a zero-padded sector is corrupt rather than renumbered."""
        with pytest.raises(CorruptIndexError) as exc_info:
            decode("/a/007\n/b/1\n")
        assert exc_info.value.line_number == 1
        assert exc_info.value.line == "/a/007"

    def test_round_trip(self):
        """Test that decoding encoded entries reproduces them."""
        entries = [
            IndexEntry("/a/b.txt", 0),
            IndexEntry("/a/c.txt", 1),
            IndexEntry("/d.txt", 4),
            IndexEntry("/deep/er/still/x.bin", 2),
            IndexEntry("/numbers/123", 3),
        ]
        assert decode(encode(entries)) == entries
