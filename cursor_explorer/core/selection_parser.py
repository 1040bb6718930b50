"""
Maps a selected menu line back to a browser action
"""

import logging
import re
from typing import Optional

from ..models.actions import (
    Action,
    GoToParent,
    OpenCdMenu,
    Quit,
    EnterDirectory,
    ActOnFile
)
from ..models.dir_entry import Listing
from .directory_lister import PARENT_ITEM, CD_ITEM, QUIT_ITEM
from .exceptions import SelectionError

logger = logging.getLogger(__name__)

ORDINAL_PATTERN = re.compile(r'^(?P<index>\d+)\. (?P<text>.*)$', re.DOTALL)

# Greedy name group so the annotation is taken from the right; names that
# contain " (" themselves still resolve.
ANNOTATION_PATTERN = re.compile(
    r'^(?P<name>.*) \((?P<note>DIR|\d+ B|\d+\.\d{2} (?:KB|MB|GB|TB|PB))\)$',
    re.DOTALL
)


def matches_search(query: str, item: str) -> bool:
    """
    Search predicate handed to the selection prompt.

    Case-insensitive substring match; a query starting with '/' matches
    the rest of the query against the start of the line, so "/12." picks
    item number 12.
    """
    query = query.lower()
    item = item.lower()
    if query.startswith('/'):
        return item.startswith(query[1:])
    return query in item


def strip_ordinal(line: str) -> str:
    """Remove the "N. " prefix from a menu line"""
    match = ORDINAL_PATTERN.match(line)
    if not match:
        raise SelectionError(f"Menu line has no ordinal prefix: {line!r}")
    return match.group('text')


class SelectionParser:
    """Turns the line chosen in the prompt into an Action"""

    def parse(self, selected_line: str, listing: Optional[Listing] = None) -> Action:
        """
        Parse a selected menu line.

        Args:
            selected_line: Line returned by the prompt
            listing: Listing the line was chosen from; when given, the line
                must belong to it

        Returns:
            GoToParent, OpenCdMenu, Quit, EnterDirectory or ActOnFile

        Raises:
            SelectionError: If the line is not part of the listing or has
                no recognizable shape
        """
        if listing is not None and selected_line not in listing:
            raise SelectionError(f"Selection is not part of the current listing: {selected_line!r}")

        text = strip_ordinal(selected_line)

        if text == PARENT_ITEM:
            return GoToParent()
        if text == CD_ITEM:
            return OpenCdMenu()
        if text == QUIT_ITEM:
            return Quit()

        match = ANNOTATION_PATTERN.match(text)
        if not match:
            raise SelectionError(f"Cannot determine entry name from {selected_line!r}")

        name = match.group('name')
        if match.group('note') == 'DIR':
            action = EnterDirectory(name)
        else:
            action = ActOnFile(name)
        logger.debug(f"Parsed {selected_line!r} as {action}")
        return action
