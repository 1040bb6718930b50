"""
Directory entry model
"""

from dataclasses import dataclass, field
from typing import List

from ..utils.formatting import format_size


@dataclass
class DirEntry:
    """A single entry read from a directory during one browse pass"""
    name: str
    is_dir: bool
    size: int = 0  # bytes, files only

    @property
    def annotation(self) -> str:
        """Text shown in parentheses after the name"""
        if self.is_dir:
            return "DIR"
        return format_size(self.size)

    def display_name(self) -> str:
        """Name with its annotation suffix, without the ordinal"""
        return f"{self.name} ({self.annotation})"


@dataclass
class Listing:
    """
    Rendered menu for one iteration of the browser.

    items holds the display lines in order; entries holds the directories
    followed by the files that produced them.
    """
    path: str
    items: List[str] = field(default_factory=list)
    entries: List[DirEntry] = field(default_factory=list)

    @property
    def directories(self) -> List[DirEntry]:
        return [e for e in self.entries if e.is_dir]

    @property
    def files(self) -> List[DirEntry]:
        return [e for e in self.entries if not e.is_dir]

    def __contains__(self, line: str) -> bool:
        return line in self.items
