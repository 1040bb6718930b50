"""
Terminal session setup kept out of the browsing logic
"""

import logging
import sys
from typing import TextIO


class TerminalSession:
    """
    Context manager that prepares the console for an interactive session.

    Sets the window title (SetConsoleTitleW on Windows, an xterm title
    sequence elsewhere when attached to a terminal) and logs the start and
    end of the session.
    """

    def __init__(self, title: str = "Cursor Explorer", stream: TextIO = None):
        self.title = title
        self.stream = stream or sys.stdout
        self.logger = logging.getLogger(__name__)

    def set_title(self, title: str) -> bool:
        """
        Set the console window title

        Returns:
            True if a title was set
        """
        if sys.platform.startswith('win'):
            import ctypes
            return bool(ctypes.windll.kernel32.SetConsoleTitleW(title))

        if not self.stream.isatty():
            return False
        self.stream.write(f"\033]0;{title}\007")
        self.stream.flush()
        return True

    def __enter__(self):
        if self.set_title(self.title):
            self.logger.debug(f"Console title set to {self.title!r}")
        self.logger.info("Terminal session started")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None and not issubclass(exc_type, KeyboardInterrupt):
            self.logger.error(f"Terminal session ended with {exc_type.__name__}: {exc_val}")
        else:
            self.logger.info("Terminal session ended")
        return False
