"""
Tests for DirectoryLister
"""

import pytest
from unittest.mock import patch

from cursor_explorer.core.directory_lister import DirectoryLister
from cursor_explorer.core.exceptions import ReadError, StatError
from cursor_explorer.core.selection_parser import strip_ordinal
from cursor_explorer.models.dir_entry import DirEntry


class TestDirectoryLister:
    """Test suite for DirectoryLister"""

    def test_fixed_entries_and_layout(self, browse_root):
        items = DirectoryLister().list(str(browse_root))

        assert items == [
            "0. ..",
            "1. cd (Change Directory)",
            "2. Beta (DIR)",
            "3. alpha (DIR)",
            "4. docs (DIR)",
            "5. Zeta.log (2.00 KB)",
            "6. notes.txt (11 B)",
            "7. report (final).csv (8 B)",
            "8. Quit",
        ]

    def test_ordinals_match_positions(self, browse_root):
        items = DirectoryLister().list(str(browse_root))
        for index, item in enumerate(items):
            assert item.startswith(f"{index}. ")

    def test_directories_precede_files_and_groups_are_sorted(self, browse_root):
        listing = DirectoryLister().list_directory(str(browse_root))

        dir_names = [e.name for e in listing.directories]
        file_names = [e.name for e in listing.files]
        assert dir_names == sorted(dir_names)
        assert file_names == sorted(file_names)

        kinds = [e.is_dir for e in listing.entries]
        assert kinds == sorted(kinds, reverse=True)

    def test_empty_directory(self, temp_dir):
        empty = temp_dir / "empty"
        empty.mkdir()

        items = DirectoryLister().list(str(empty))

        assert items == ["0. ..", "1. cd (Change Directory)", "2. Quit"]

    def test_missing_directory_raises_read_error(self, temp_dir):
        missing = temp_dir / "gone"
        with pytest.raises(ReadError) as exc_info:
            DirectoryLister().list(str(missing))
        assert exc_info.value.path == str(missing)

    def test_file_path_raises_read_error(self, browse_root):
        with pytest.raises(ReadError):
            DirectoryLister().list(str(browse_root / "notes.txt"))

    def test_entries_with_unreadable_metadata_are_skipped(self, browse_root):
        lister = DirectoryLister()
        original = lister._read_entry

        def flaky(entry):
            if entry.name == "notes.txt":
                raise StatError(entry.name, "permission denied")
            return original(entry)

        with patch.object(lister, '_read_entry', side_effect=flaky):
            items = lister.list(str(browse_root))

        assert not any("notes.txt" in item for item in items)
        assert "5. Zeta.log (2.00 KB)" in items
        assert items[-1] == "7. Quit"

    def test_broken_symlink_is_skipped(self, temp_dir):
        root = temp_dir / "links"
        root.mkdir()
        (root / "real.txt").write_text("ok")
        try:
            (root / "dangling").symlink_to(root / "nowhere")
        except (OSError, NotImplementedError):
            pytest.skip("symlinks not supported here")

        items = DirectoryLister().list(str(root))

        assert [strip_ordinal(i) for i in items[2:-1]] == ["real.txt (2 B)"]

    def test_symlink_to_directory_listed_as_directory(self, browse_root):
        try:
            (browse_root / "link-to-docs").symlink_to(browse_root / "docs", target_is_directory=True)
        except (OSError, NotImplementedError):
            pytest.skip("symlinks not supported here")

        listing = DirectoryLister().list_directory(str(browse_root))

        assert "link-to-docs" in [e.name for e in listing.directories]

    def test_render_counts_from_two(self):
        entries = [DirEntry("src", True), DirEntry("a.bin", False, 1572864)]
        items = DirectoryLister().render(entries)
        assert items[2:] == ["2. src (DIR)", "3. a.bin (1.50 MB)", "4. Quit"]
