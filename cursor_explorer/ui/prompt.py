"""
Interactive prompts used by the navigation loop.

The loop only talks to the Prompt interface, so tests drive it with a
scripted implementation while the real program uses CursesPrompt.
"""

import curses
import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from cursor_explorer.core.exceptions import (
    PromptError,
    PromptInterrupted,
    ValidationError
)
from cursor_explorer.core.selection_parser import matches_search
from cursor_explorer.utils.formatting import display_safe

Searcher = Callable[[str, str], bool]

# Status messages carried over to the next selection list
MAX_MESSAGES = 3

CTRL_D = '\x04'
ESCAPE = '\x1b'
BACKSPACE_KEYS = ('\x7f', '\b', curses.KEY_BACKSPACE)
ENTER_KEYS = ('\n', '\r', curses.KEY_ENTER)


class Prompt(ABC):
    """
    Selection, confirmation and text entry.

    choose() raises PromptInterrupted when the user aborts; confirm() and
    prompt_text() treat an abort as a "no" / cancel instead. Messages
    passed to notify() are printed and also queued for the next choose().
    """

    def __init__(self, input_func: Callable[[str], str] = input):
        self.input_func = input_func
        self.messages: List[str] = []
        self.logger = logging.getLogger(f'cursor_explorer.{self.__class__.__name__}')

    @abstractmethod
    def choose(self, items: List[str], label: str = "", searcher: Searcher = matches_search,
               header: str = "") -> str:
        """
        Let the user pick one of items.

        Args:
            items: Lines to choose from
            label: Question shown above the list
            searcher: Predicate (query, item) used to filter while typing
            header: Context line shown above everything else

        Raises:
            PromptInterrupted: If the user aborts
            PromptError: If the prompt cannot be shown
        """
        pass

    def notify(self, message: str) -> None:
        """Report a status or error message to the user"""
        text = display_safe(message)
        print(text)
        self.messages.append(text)

    def take_messages(self) -> List[str]:
        """Return the most recent queued messages and clear the queue"""
        messages = self.messages[-MAX_MESSAGES:]
        self.messages = []
        return messages

    def confirm(self, label: str) -> bool:
        """Ask a yes/no question; only 'y' or 'yes' count as yes"""
        try:
            answer = self.input_func(f"{display_safe(label)}? [y/N]: ")
        except (EOFError, KeyboardInterrupt):
            print()
            return False
        return answer.strip().lower() in ('y', 'yes')

    def prompt_text(self, label: str, validate: Optional[Callable[[str], None]] = None) -> Optional[str]:
        """
        Read a line of text, asking again until validate accepts it.

        Args:
            label: Prompt label
            validate: Callable raising ValidationError for bad input

        Returns:
            The entered text, or None if the user aborted
        """
        while True:
            try:
                value = self.input_func(f"{display_safe(label)}: ")
            except (EOFError, KeyboardInterrupt):
                print()
                return None

            if validate is None:
                return value
            try:
                validate(value)
            except ValidationError as e:
                print(f"✗ {display_safe(e)}")
                continue
            return value

    def pause(self, message: str = "Press Enter to continue...") -> None:
        """Wait for Enter"""
        try:
            self.input_func(display_safe(message))
        except (EOFError, KeyboardInterrupt) as e:
            raise PromptInterrupted("Input closed") from e


class CursesPrompt(Prompt):
    """
    Full-screen list selection with search-as-you-type.

    The list starts in search mode: typed characters filter the items,
    arrow keys move, Enter selects, Escape clears the search and
    Ctrl-C / Ctrl-D abort. The header line and any messages queued by
    notify() are drawn above the list, since the curses screen hides
    whatever was printed before it.
    """

    HELP_TEXT = "[↑/↓] move  [PgUp/PgDn] page  [Enter] select  [Esc] clear search  [Ctrl-C] quit"

    def __init__(self, page_size: int = 10, input_func: Callable[[str], str] = input):
        super().__init__(input_func)
        self.page_size = page_size

    def choose(self, items: List[str], label: str = "", searcher: Searcher = matches_search,
               header: str = "") -> str:
        if not items:
            raise PromptError("Nothing to choose from")

        messages = self.take_messages()
        try:
            result = curses.wrapper(self._run, items, label, searcher, header, messages)
        except KeyboardInterrupt as e:
            raise PromptInterrupted("Interrupted") from e
        except curses.error as e:
            raise PromptError(f"Terminal cannot show the selection list: {e}") from e

        if result is None:
            raise PromptInterrupted("End of input")
        self.logger.debug(f"Chose {result!r}")
        return result

    def _visible_rows(self, height: int, header: str, messages: List[str]) -> int:
        # label, search line and help line, plus the header and message block
        reserved = 3 + (1 if header else 0) + len(messages)
        return max(1, min(self.page_size, height - reserved))

    def _draw(self, stdscr, label: str, query: str, matches: List[str], index: int, offset: int,
              header: str = "", messages: List[str] = ()):
        height, width = stdscr.getmaxyx()
        stdscr.erase()

        lines = []
        if header:
            lines.append((header, curses.A_BOLD))
        for message in messages:
            lines.append((message, curses.A_STANDOUT))
        lines.append((label, curses.A_BOLD))
        lines.append((f"Search: {query}", 0))

        visible = self._visible_rows(height, header, messages)
        for i, item in enumerate(matches[offset:offset + visible]):
            attr = curses.A_REVERSE if offset + i == index else 0
            marker = "▸ " if offset + i == index else "  "
            lines.append((marker + item, attr))
        if not matches:
            lines.append(("  (no matches)", curses.A_DIM))

        for y, (text, attr) in enumerate(lines[:height - 1]):
            try:
                stdscr.addstr(y, 0, display_safe(text)[:width - 1], attr)
            except curses.error:
                # Writing to the last cell raises; nothing to do about it
                pass
        try:
            stdscr.addstr(height - 1, 0, self.HELP_TEXT[:width - 1], curses.A_DIM)
        except curses.error:
            pass
        stdscr.refresh()
        return visible

    def _run(self, stdscr, items: List[str], label: str, searcher: Searcher,
             header: str = "", messages: List[str] = ()) -> Optional[str]:
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        stdscr.keypad(True)

        query = ""
        index = 0
        offset = 0

        while True:
            matches = [item for item in items if searcher(query, item)] if query else list(items)
            if index >= len(matches):
                index = max(0, len(matches) - 1)

            visible = self._visible_rows(stdscr.getmaxyx()[0], header, messages)
            if index < offset:
                offset = index
            elif index >= offset + visible:
                offset = index - visible + 1

            self._draw(stdscr, label, query, matches, index, offset, header, messages)

            key = stdscr.get_wch()

            if key in ENTER_KEYS:
                if matches:
                    return matches[index]
            elif key == CTRL_D:
                return None
            elif key == ESCAPE:
                query = ""
                index = 0
            elif key in BACKSPACE_KEYS:
                query = query[:-1]
                index = 0
            elif key == curses.KEY_UP:
                index = max(0, index - 1)
            elif key == curses.KEY_DOWN:
                index = min(len(matches) - 1, index + 1) if matches else 0
            elif key == curses.KEY_PPAGE:
                index = max(0, index - visible)
            elif key == curses.KEY_NPAGE:
                index = min(len(matches) - 1, index + visible) if matches else 0
            elif key == curses.KEY_HOME:
                index = 0
            elif key == curses.KEY_END:
                index = max(0, len(matches) - 1)
            elif isinstance(key, str) and key.isprintable():
                query += key
                index = 0
