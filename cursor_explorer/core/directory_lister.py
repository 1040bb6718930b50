"""
Directory listing and menu rendering.

Every browse pass reads the directory afresh; nothing is cached, so the
ordinals in a rendered listing are only valid for that pass.
"""

import logging
import os
from typing import List

from ..models.dir_entry import DirEntry, Listing
from .exceptions import ReadError, StatError

PARENT_ITEM = ".."
CD_ITEM = "cd (Change Directory)"
QUIT_ITEM = "Quit"


def number_item(index: int, text: str) -> str:
    """Prefix a menu line with its ordinal"""
    return f"{index}. {text}"


class DirectoryLister:
    """
    Reads a directory and renders the selectable menu for it.

    Directories come first, then everything else, each group sorted by
    name (case-sensitive, code point order).
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def _read_entry(self, entry: os.DirEntry) -> DirEntry:
        try:
            is_dir = entry.is_dir()
            size = 0 if is_dir else entry.stat().st_size
        except OSError as e:
            raise StatError(entry.name, f"Cannot read metadata for {entry.name}: {e}") from e
        return DirEntry(name=entry.name, is_dir=is_dir, size=size)

    def read_entries(self, path: str) -> List[DirEntry]:
        """
        Read the entries of a directory, directories first.

        Args:
            path: Directory to read

        Returns:
            Sorted directory entries followed by sorted file entries

        Raises:
            ReadError: If the directory cannot be opened
        """
        dirs = []
        files = []
        skipped = 0

        try:
            with os.scandir(path) as entries:
                for entry in entries:
                    try:
                        item = self._read_entry(entry)
                    except StatError as e:
                        skipped += 1
                        self.logger.warning(
                            f"Skipping entry: {e}",
                            extra={'path': path, 'entry': e.name}
                        )
                        continue
                    if item.is_dir:
                        dirs.append(item)
                    else:
                        files.append(item)
        except OSError as e:
            self.logger.error(f"Failed to read directory {path}: {e}",
                              extra={'path': path, 'error': str(e)})
            raise ReadError(path, f"Cannot read directory {path}: {e.strerror or e}") from e

        if skipped:
            self.logger.info(f"Skipped {skipped} unreadable entries in {path}")

        dirs.sort(key=lambda e: e.name)
        files.sort(key=lambda e: e.name)
        return dirs + files

    def render(self, entries: List[DirEntry]) -> List[str]:
        """
        Build the numbered menu lines for a set of entries.

        Args:
            entries: Directories followed by files, already sorted

        Returns:
            ["0. ..", "1. cd (Change Directory)", <entries>, "N. Quit"]
        """
        items = [
            number_item(0, PARENT_ITEM),
            number_item(1, CD_ITEM),
        ]
        for entry in entries:
            items.append(number_item(len(items), entry.display_name()))
        items.append(number_item(len(items), QUIT_ITEM))
        return items

    def list_directory(self, path: str) -> Listing:
        """Read and render a directory in one step"""
        entries = self.read_entries(path)
        listing = Listing(path=path, items=self.render(entries), entries=entries)
        self.logger.debug(f"Listed {len(entries)} entries in {path}")
        return listing

    def list(self, path: str) -> List[str]:
        """
        Menu lines for a directory.

        Raises:
            ReadError: If the directory cannot be opened
        """
        return self.list_directory(path).items
