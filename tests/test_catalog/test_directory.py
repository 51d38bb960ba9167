import pytest

from sectorvfs.catalog import IndexEntry, VirtualDirectory, normalize
from sectorvfs.core.exceptions import InvalidPathError


class TestNormalize:
    """Tests for virtual path normalization."""

    def test_relative_path_gets_leading_separator(self):
        """Test that a relative path is made absolute."""
        assert normalize("a/b.txt") == "/a/b.txt"

    def test_absolute_path_unchanged(self):
        """Test that an absolute path is returned as is."""
        assert normalize("/a/b.txt") == "/a/b.txt"

    def test_empty_path_rejected(self):
        """Test that an empty path raises InvalidPathError."""
        with pytest.raises(InvalidPathError):
            normalize("")

    @pytest.mark.parametrize("path", ["a\nb", "a\rb"])
    def test_line_breaks_rejected(self, path):
        """Test that paths which would split an index line are rejected."""
        with pytest.raises(InvalidPathError):
            normalize(path)


class TestVirtualDirectory:
    """Tests for lookups, listings and allocation over an index."""

    def setup_method(self):
        """Set up a small index before each test."""
        self.directory = VirtualDirectory([
            IndexEntry("/a/b.txt", 0),
            IndexEntry("/a/c.txt", 1),
            IndexEntry("/d.txt", 2),
            IndexEntry("/a/sub/e.txt", 3),
            IndexEntry("/ab.txt", 5),
        ])

    def test_from_text(self):
        """Test building a directory from index text."""
        directory = VirtualDirectory.from_text("/a/0\n/b/1\n")
        assert directory.entries == [IndexEntry("/a", 0), IndexEntry("/b", 1)]

    def test_to_text(self):
        """Test rendering a directory back to index text."""
        assert VirtualDirectory([IndexEntry("/a", 0)]).to_text() == "/a/0\n"

    def test_len_and_iter(self):
        """Test length and iteration in index order."""
        assert len(self.directory) == 5
        assert [e.sector for e in self.directory] == [0, 1, 2, 3, 5]

    def test_entries_is_a_copy(self):
        """Test that mutating the returned entries leaves the directory intact."""
        self.directory.entries.clear()
        assert len(self.directory) == 5

    def test_lookup_found(self):
        """Test lookup of a present file."""
        assert self.directory.lookup("/a/c.txt") == 1

    def test_lookup_normalizes(self):
        """Test that lookup accepts relative paths."""
        assert self.directory.lookup("a/c.txt") == 1

    def test_lookup_missing(self):
        """Test that directories and unknown paths are not found."""
        assert self.directory.lookup("/a") is None
        assert self.directory.lookup("/nope.txt") is None

    def test_lookup_sector_zero_counts_as_present(self):
        """Test that sector 0 is not mistaken for absence."""
        assert self.directory.exists("/a/b.txt")

    def test_contains(self):
        """Test the membership operator."""
        assert "d.txt" in self.directory
        assert "/x" not in self.directory

    def test_list_root_collapses_subdirectories(self):
        """Test that nested files show up once as their top directory."""
        names = self.directory.list_children("/")
        assert set(names) == {"a/", "d.txt", "ab.txt"}
        assert len(names) == 3

    def test_list_root_is_first_occurrence_order(self):
        """Test that names keep the order they first appear in."""
        assert self.directory.list_children("/") == ["a/", "d.txt", "ab.txt"]

    def test_list_subdirectory(self):
        """Test listing one level below a subdirectory."""
        assert set(self.directory.list_children("/a")) == {"b.txt", "c.txt", "sub/"}

    def test_list_subdirectory_with_trailing_separator(self):
        """Test that a trailing '/' on the directory is accepted."""
        assert set(self.directory.list_children("/a/")) == {"b.txt", "c.txt", "sub/"}

    def test_list_recursive(self):
        """Test that recursive listing keeps nested relative paths."""
        names = self.directory.list_children("a", recursive=True)
        assert set(names) == {"b.txt", "c.txt", "sub/e.txt"}

    def test_list_does_not_match_sibling_prefix(self):
        """Test that /ab.txt is not listed under /a."""
        assert "ab.txt" not in self.directory.list_children("/a", recursive=True)

    def test_list_missing_directory(self):
        """Test that an unknown directory lists nothing."""
        assert self.directory.list_children("/nothing") == []

    def test_allocate_first_gap(self):
        """Test that allocation picks the first unused sector."""
        assert self.directory.allocate_sector() == 4

    def test_allocate_empty(self):
        """Test that an empty index allocates sector 0."""
        assert VirtualDirectory().allocate_sector() == 0

    def test_allocate_ignores_entry_order(self):
        """Test first-fit when entries are not sorted by sector."""
        directory = VirtualDirectory([IndexEntry("/x", 1), IndexEntry("/y", 0), IndexEntry("/z", 3)])
        assert directory.allocate_sector() == 2

    def test_allocate_after_last(self):
        """Test allocation past a dense run of sectors."""
        directory = VirtualDirectory([IndexEntry("/x", 0), IndexEntry("/y", 1)])
        assert directory.allocate_sector() == 2

    def test_without(self):
        """Test that without() returns a copy lacking the entry."""
        remaining = self.directory.without("a/b.txt")
        assert not remaining.exists("/a/b.txt")
        assert len(remaining) == 4
        assert len(self.directory) == 5

    def test_without_missing_path_is_noop(self):
        """Test that removing an unknown path changes nothing."""
        assert len(self.directory.without("/nope")) == 5
