"""
Pytest configuration and shared fixtures for Cursor Explorer tests
"""

import pytest
from pathlib import Path
from typing import Any, List, Optional
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cursor_explorer.core.application_context import ApplicationContext
from cursor_explorer.core.exceptions import PromptInterrupted
from cursor_explorer.core.selection_parser import strip_ordinal
from cursor_explorer.ui.prompt import Prompt


class ScriptedPrompt(Prompt):
    """
    Prompt fake replaying canned answers.

    choices entries may be:
    - a menu line without its ordinal ("docs (DIR)", "Quit", "Open")
    - an exact line from the menu
    - a callable receiving the items and returning a line
    - an exception instance to raise
    Running out of choices raises PromptInterrupted so a loop always ends.
    headers and notices record the header line and the queued messages
    each selection list would have displayed.
    """

    def __init__(self, choices: List[Any] = None, confirms: List[str] = None,
                 texts: List[Optional[str]] = None, pauses: List[Any] = None):
        super().__init__(input_func=self._no_input)
        self.choices = list(choices or [])
        self.confirms = list(confirms or [])
        self.texts = list(texts or [])
        self.pauses = list(pauses or [])
        self.shown = []
        self.labels = []
        self.headers = []
        self.notices = []

    @staticmethod
    def _no_input(label):
        raise AssertionError(f"Unexpected console input: {label}")

    def choose(self, items, label="", searcher=None, header=""):
        self.shown.append(list(items))
        self.labels.append(label)
        self.headers.append(header)
        self.notices.append(self.take_messages())
        if not self.choices:
            raise PromptInterrupted("Script exhausted")

        value = self.choices.pop(0)
        if isinstance(value, BaseException):
            raise value
        if callable(value):
            return value(items)
        if value in items:
            return value
        for item in items:
            if strip_ordinal(item) == value:
                return item
        return value

    def confirm(self, label):
        self.labels.append(label)
        answer = self.confirms.pop(0) if self.confirms else "n"
        return answer.strip().lower() in ('y', 'yes')

    def prompt_text(self, label, validate=None):
        self.labels.append(label)
        return self.texts.pop(0) if self.texts else None

    def pause(self, message="Press Enter to continue..."):
        self.labels.append(message)
        if self.pauses:
            value = self.pauses.pop(0)
            if isinstance(value, BaseException):
                raise value


@pytest.fixture
def temp_dir(tmp_path):
    """Temporary directory for test files"""
    return tmp_path


@pytest.fixture
def scripted_prompt():
    """Empty scripted prompt; tests fill in the answers"""
    return ScriptedPrompt()


@pytest.fixture
def app_context(temp_dir, scripted_prompt):
    """ApplicationContext logging into the temp dir with a scripted prompt"""
    context = ApplicationContext(
        log_dir=temp_dir / "logs",
        quiet=True,
        prompt=scripted_prompt
    )
    yield context
    context.cleanup()


@pytest.fixture
def browse_root(temp_dir) -> Path:
    """
    A small directory tree:

        browse/
            alpha/
            Beta/
            docs/
                guide.md
            notes.txt   (11 bytes)
            report (final).csv
            Zeta.log
    """
    root = temp_dir / "browse"
    root.mkdir()
    (root / "alpha").mkdir()
    (root / "Beta").mkdir()
    (root / "docs").mkdir()
    (root / "docs" / "guide.md").write_text("# Guide\n")
    (root / "notes.txt").write_text("hello world")
    (root / "report (final).csv").write_text("a,b\n1,2\n")
    (root / "Zeta.log").write_bytes(b"x" * 2048)
    return root
