"""
Interactive navigation loop.

One outer iteration lists the current directory, asks the prompt for a
selection and applies the resulting action. Sub-dialogs (change
directory, file actions, confirmations) run inside that iteration and
always fall back to browsing.
"""

import logging
import os
import stat
from dataclasses import dataclass
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
from ..utils.formatting import breadcrumb, display_safe, numbered_segments, truncate_to_segment
from .application_context import ApplicationContext
from .directory_lister import DirectoryLister
from .exceptions import (
    CancelledError,
    ExplorerError,
    FatalBrowseError,
    PromptError,
    PromptInterrupted,
    ReadError,
    SelectionError
)
from .selection_parser import SelectionParser, matches_search

SELECT_LABEL = "Select a file or directory (use arrow keys, Enter to select, or type the number)"
CD_LABEL = "Enter the number of the directory you want to navigate to (or 'c' to cancel)"

FILE_ACTIONS = ["Open", "Delete", "Copy", "Back"]

ACTION_ERROR_LABELS = {
    'open': "Error opening file",
    'delete': "Error deleting file",
    'copy': "Error copying file",
}


@dataclass
class NavigationState:
    """Mutable browsing state, owned by a single NavigationLoop run"""
    current_path: str
    iterations: int = 0

    @property
    def parent(self) -> str:
        return os.path.dirname(self.current_path)


class NavigationLoop:
    """
    Drives the browser until the user quits.

    Per-action failures are reported through Prompt.notify() and browsing
    continues; only an unreadable filesystem root ends the loop with
    FatalBrowseError.
    """

    def __init__(
        self,
        context: ApplicationContext,
        lister: Optional[DirectoryLister] = None,
        parser: Optional[SelectionParser] = None
    ):
        self.context = context
        self.lister = lister or DirectoryLister()
        self.parser = parser or SelectionParser()
        self.logger = logging.getLogger(__name__)

    @property
    def prompt(self):
        return self.context.prompt

    def run(self, start_path: Optional[str] = None) -> NavigationState:
        """
        Browse from start_path (default: the working directory).

        Returns:
            The final navigation state

        Raises:
            FatalBrowseError: If no directory up to the root can be read
        """
        state = NavigationState(current_path=os.path.abspath(start_path or os.getcwd()))
        self.logger.info(f"Starting file explorer in {state.current_path}",
                         extra={'path': state.current_path})

        print("Select a file or directory (use arrow keys and Enter to select)")
        print("Type to search, use '/' to start search from the beginning")

        while True:
            state.iterations += 1
            listing = self.load_listing(state)
            header = f"Current directory: {display_safe(breadcrumb(state.current_path))}"
            print(f"\n{header}")

            try:
                selected = self.prompt.choose(listing.items, SELECT_LABEL, matches_search, header=header)
            except PromptInterrupted:
                self.logger.info("User interrupted the program")
                print("Exiting...")
                return state
            except PromptError as e:
                self.logger.error(f"Prompt failed: {e}")
                self.prompt.notify(f"Prompt failed: {e}")
                try:
                    self.prompt.pause("Press Enter to continue...")
                except PromptInterrupted:
                    print("Exiting...")
                    return state
                continue

            self.logger.info(f"User selected item {selected!r}", extra={'path': state.current_path})

            try:
                keep_going = self.handle_selection(state, selected, listing)
            except PromptInterrupted:
                self.logger.info("User interrupted the program")
                keep_going = False

            if not keep_going:
                print("Exiting...")
                return state

    def load_listing(self, state: NavigationState) -> Listing:
        """
        List the current directory, moving up until a listing succeeds.

        Raises:
            FatalBrowseError: If the filesystem root itself cannot be read
        """
        while True:
            try:
                listing = self.lister.list_directory(state.current_path)
            except ReadError as e:
                self.prompt.notify(f"Error reading directory: {e}")
                parent = state.parent
                if parent == state.current_path:
                    self.logger.critical(f"Cannot read filesystem root {state.current_path}")
                    raise FatalBrowseError(
                        f"Unable to read any directory up to {state.current_path}: {e}"
                    ) from e
                self.logger.info(f"Moving up to {parent} after read failure",
                                 extra={'path': state.current_path})
                state.current_path = parent
                continue

            self.logger.info(f"Entered directory {state.current_path}",
                             extra={'path': state.current_path})
            return listing

    def handle_selection(self, state: NavigationState, selected: str, listing: Listing) -> bool:
        """
        Parse and apply a selected line.

        Returns:
            False if the user chose to quit
        """
        try:
            action = self.parser.parse(selected, listing)
        except SelectionError as e:
            self.logger.warning(str(e))
            self.prompt.notify(f"Invalid selection: {e}")
            return True
        return self.dispatch(state, action)

    def dispatch(self, state: NavigationState, action: Action) -> bool:
        """
        Apply an action to the navigation state.

        Returns:
            False for Quit, True otherwise
        """
        if isinstance(action, Quit):
            self.logger.info("User chose to quit")
            return False

        if isinstance(action, GoToParent):
            state.current_path = state.parent
            self.logger.info(f"Moved up one directory to {state.current_path}",
                             extra={'path': state.current_path})
        elif isinstance(action, OpenCdMenu):
            self.change_directory(state)
        elif isinstance(action, (EnterDirectory, ActOnFile)):
            self.open_entry(state, action.name)
        return True

    def change_directory(self, state: NavigationState) -> None:
        """Jump to an ancestor picked by segment number"""
        for line in numbered_segments(state.current_path):
            print(display_safe(line))

        answer = self.prompt.prompt_text(CD_LABEL)
        if answer is None or answer.strip().lower() == 'c':
            self.prompt.notify("Cancelled directory change.")
            return

        try:
            new_path = truncate_to_segment(state.current_path, int(answer.strip()))
        except (ValueError, IndexError):
            self.logger.info(f"Invalid input for cd command: {answer!r}")
            self.prompt.notify("Invalid input. Staying in current directory.")
            return

        state.current_path = new_path
        self.logger.info(f"Changed directory to {new_path}", extra={'path': new_path})
        self.prompt.notify(f"Changed directory to: {new_path}")

    def open_entry(self, state: NavigationState, name: str) -> None:
        """Enter a directory or show the file action menu for a file"""
        full_path = os.path.join(state.current_path, name)
        try:
            entry_stat = os.stat(full_path)
        except OSError as e:
            self.logger.error(f"Failed to get file info for {name}: {e}",
                              extra={'file': full_path, 'error': str(e)})
            self.prompt.notify(f"Error getting file info for '{name}': {e}")
            return

        if stat.S_ISDIR(entry_stat.st_mode):
            state.current_path = full_path
            return

        self.run_file_action(full_path)

    def run_file_action(self, path: str) -> None:
        """Ask what to do with a file and run it; always returns to browsing"""
        name = os.path.basename(path)
        try:
            choice = self.prompt.choose(FILE_ACTIONS, f"Choose an action for {name}",
                                        header=f"File: {display_safe(path)}")
        except PromptInterrupted:
            raise
        except PromptError as e:
            self.logger.error(f"Prompt failed: {e}")
            self.prompt.notify(f"Prompt failed: {e}")
            choice = "Back"

        self.logger.info(f"File action selected: {choice}", extra={'file': path, 'action': choice})
        if choice not in FILE_ACTIONS or choice == "Back":
            return

        operation_name = choice.lower()
        operation = self.context.get_operation(operation_name)
        try:
            message = operation.execute(path)
        except CancelledError as e:
            self.prompt.notify(str(e))
            return
        except ExplorerError as e:
            self.prompt.notify(f"{ACTION_ERROR_LABELS[operation_name]}: {e}")
            return

        self.prompt.notify(message)
